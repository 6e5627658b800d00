"""Ready-made deserializer/serializer pairs for common configuration formats.

Every helper returns a plain callable, so they can be passed straight to the
loader functions or swapped for any other callable with the same shape.
"""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

import yaml
from pydantic import BaseModel

__all__ = [
    "json_deserializer",
    "json_serializer",
    "yaml_deserializer",
    "yaml_serializer",
    "model_deserializer",
    "model_serializer",
]

M = TypeVar("M", bound=BaseModel)


def json_deserializer(contents: str | bytes) -> Any:
    return json.loads(contents)


def json_serializer(*, indent: int | None = 2, sort_keys: bool = False) -> Callable[[Any], str]:
    """Build a JSON serializer; output always ends with a newline."""

    def serialize(value: Any) -> str:
        return json.dumps(value, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n"

    return serialize


def yaml_deserializer(contents: str | bytes) -> Any:
    """Parse YAML with ``safe_load``; an empty document loads as ``{}``."""

    data = yaml.safe_load(contents)
    return {} if data is None else data


def yaml_serializer(*, sort_keys: bool = False) -> Callable[[Any], str]:
    def serialize(value: Any) -> str:
        return yaml.safe_dump(value, sort_keys=sort_keys, default_flow_style=False, allow_unicode=True)

    return serialize


def model_deserializer(model: type[M], loads: Callable[[Any], Any]) -> Callable[[Any], M]:
    """Parse with ``loads`` and validate the result into ``model``.

    A pydantic ``ValidationError`` surfaces from the loader as a
    ``DeserializeError`` like any other parse failure.
    """

    def deserialize(contents: Any) -> M:
        return model.model_validate(loads(contents))

    return deserialize


def model_serializer(dumps: Callable[[Any], Any]) -> Callable[[BaseModel], Any]:
    """Dump a pydantic model to JSON-compatible data and hand it to ``dumps``."""

    def serialize(value: BaseModel) -> Any:
        return dumps(value.model_dump(mode="json"))

    return serialize
