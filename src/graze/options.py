"""Typed I/O settings shared by the loader functions."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["LoaderOptions", "DEFAULT_OPTIONS"]


class LoaderOptions(BaseModel):
    """How the configuration file is decoded on read and encoded on write.

    ``encoding=None`` switches to binary mode: the deserializer receives
    ``bytes`` and serializer output must be ``bytes``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str | None = Field(default="utf-8")
    errors: str = Field(default="strict")
    newline: str | None = None

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                codecs.lookup(value)
            except LookupError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @field_validator("errors")
    @classmethod
    def check_errors(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("newline")
    @classmethod
    def check_newline(cls, value: str | None) -> str | None:
        if value not in (None, "", "\n", "\r", "\r\n"):
            raise ValueError(f"illegal newline value: {value!r}")
        return value

    @property
    def binary(self) -> bool:
        return self.encoding is None


DEFAULT_OPTIONS = LoaderOptions()
