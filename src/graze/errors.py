"""Error taxonomy raised by the configuration loaders."""

from __future__ import annotations

import os
from enum import Enum

__all__ = [
    "Stage",
    "LoadError",
    "LoadIOError",
    "DeserializeError",
    "SerializeError",
]


class Stage(str, Enum):
    """Pipeline step at which a load failed."""

    READ = "read"
    WRITE = "write"
    DESERIALIZE = "deserialize"
    SERIALIZE = "serialize"


_MESSAGES = {
    Stage.READ: "An error occurred while opening the configuration file",
    Stage.WRITE: "An error occurred while writing the configuration file",
    Stage.DESERIALIZE: "Configuration file is incorrect",
    Stage.SERIALIZE: "Could not serialize the default configuration",
}


class LoadError(Exception):
    """Base error for every configuration loading failure.

    ``error`` holds the wrapped failure (also chained as ``__cause__``),
    ``path`` the configuration file involved and ``stage`` the step that failed.
    """

    def __init__(self, path: str | os.PathLike[str], error: BaseException, stage: Stage) -> None:
        self.path = os.fspath(path)
        self.error = error
        self.stage = stage
        super().__init__(f"{_MESSAGES[stage]}: {error}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, stage={self.stage.value!r}, error={self.error!r})"


class LoadIOError(LoadError):
    """Raised when the configuration file cannot be read or written."""

    def __init__(self, path: str | os.PathLike[str], error: BaseException, stage: Stage = Stage.READ) -> None:
        if stage not in (Stage.READ, Stage.WRITE):
            raise ValueError(f"I/O errors happen while reading or writing, not during {stage.value}")
        super().__init__(path, error, stage)


class DeserializeError(LoadError):
    """Raised when the deserializer rejects the contents of an existing file."""

    def __init__(self, path: str | os.PathLike[str], error: BaseException) -> None:
        super().__init__(path, error, Stage.DESERIALIZE)


class SerializeError(LoadError):
    """Raised when the default configuration cannot be serialized for writing."""

    def __init__(self, path: str | os.PathLike[str], error: BaseException) -> None:
        super().__init__(path, error, Stage.SERIALIZE)
