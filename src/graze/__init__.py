"""graze: load configuration files with caller-supplied (de)serializers."""

from __future__ import annotations

import logging

from .errors import DeserializeError, LoadError, LoadIOError, SerializeError, Stage
from .loader import (
    DefaultProvider,
    Deserializer,
    Serializer,
    load_from_path,
    load_or_default,
    load_or_write_default,
)
from .options import LoaderOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.2.0"

__all__ = [
    "load_from_path",
    "load_or_default",
    "load_or_write_default",
    "LoaderOptions",
    "Deserializer",
    "Serializer",
    "DefaultProvider",
    "LoadError",
    "LoadIOError",
    "DeserializeError",
    "SerializeError",
    "Stage",
]
