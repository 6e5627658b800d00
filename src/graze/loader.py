"""Load configuration files through caller-supplied deserializers.

Three entry points share one read → deserialize pipeline and differ only in how
a missing file is handled:

- :func:`load_from_path` fails with :class:`~graze.errors.LoadIOError`.
- :func:`load_or_default` returns the default and leaves the disk untouched.
- :func:`load_or_write_default` returns the default after writing it to the path.

A file that exists but cannot be parsed always raises
:class:`~graze.errors.DeserializeError`, even when a default is supplied.
"""

from __future__ import annotations

import contextlib
import copy
import logging
import os
from typing import Any, Callable, TypeVar, Union

from .errors import DeserializeError, LoadIOError, SerializeError, Stage
from .options import DEFAULT_OPTIONS, LoaderOptions

__all__ = [
    "Deserializer",
    "Serializer",
    "DefaultProvider",
    "load_from_path",
    "load_or_default",
    "load_or_write_default",
]

T = TypeVar("T")

RawContents = Union[str, bytes]
Deserializer = Callable[[Any], T]
Serializer = Callable[[T], RawContents]
DefaultProvider = Union[T, Callable[[], T]]
PathLike = Union[str, "os.PathLike[str]"]

_LOG = logging.getLogger(__name__)
_ABSENT = object()


def load_from_path(
    path: PathLike,
    deserializer: Deserializer[T],
    *,
    options: LoaderOptions | None = None,
    logger: logging.Logger | None = None,
) -> T:
    """Load the configuration stored at ``path``.

    Raises:
        LoadIOError: the file could not be read, including when it does not exist.
        DeserializeError: ``deserializer`` raised on the file contents.
    """

    log = logger or _LOG
    contents = _read(path, options or DEFAULT_OPTIONS, log, allow_absent=False)
    return _deserialize(path, contents, deserializer, log)


def load_or_default(
    path: PathLike,
    deserializer: Deserializer[T],
    default: DefaultProvider[T],
    *,
    options: LoaderOptions | None = None,
    logger: logging.Logger | None = None,
) -> T:
    """Load the configuration at ``path``, or return ``default`` if the file does not exist.

    ``default`` is either the value itself (deep-copied on each use) or a
    zero-argument callable producing it. Nothing is ever written.
    """

    log = logger or _LOG
    contents = _read(path, options or DEFAULT_OPTIONS, log, allow_absent=True)
    if contents is _ABSENT:
        log.debug("Configuration file %s not found; using default", os.fspath(path))
        return _produce_default(default)
    return _deserialize(path, contents, deserializer, log)


def load_or_write_default(
    path: PathLike,
    deserializer: Deserializer[T],
    default: DefaultProvider[T],
    serializer: Serializer[T],
    *,
    options: LoaderOptions | None = None,
    logger: logging.Logger | None = None,
) -> T:
    """Load the configuration at ``path``, creating it from ``default`` if missing.

    When the file does not exist the default is serialized with ``serializer``
    and written to a newly created file before being returned. An existing file
    is never rewritten. If the write fails the call raises and the path stays
    absent, so the returned value always matches what is on disk.

    Raises:
        LoadIOError: reading failed for a reason other than absence, or writing failed.
        DeserializeError: the existing file could not be parsed.
        SerializeError: ``serializer`` raised or returned something unwritable.
    """

    log = logger or _LOG
    opts = options or DEFAULT_OPTIONS
    contents = _read(path, opts, log, allow_absent=True)
    if contents is not _ABSENT:
        return _deserialize(path, contents, deserializer, log)

    log.debug("Configuration file %s not found; writing default", os.fspath(path))
    value = _produce_default(default)
    payload = _serialize(path, value, serializer, opts)
    _write_new(path, payload, log)
    return value


def _read(path: PathLike, options: LoaderOptions, log: logging.Logger, *, allow_absent: bool) -> Any:
    log.debug("Reading configuration file %s", os.fspath(path))
    try:
        if options.binary:
            with open(path, "rb") as handle:
                return handle.read()
        with open(path, "r", encoding=options.encoding, errors=options.errors, newline=options.newline) as handle:
            return handle.read()
    except FileNotFoundError as exc:
        if allow_absent:
            return _ABSENT
        raise LoadIOError(path, exc, Stage.READ) from exc
    except (OSError, UnicodeError) as exc:
        raise LoadIOError(path, exc, Stage.READ) from exc


def _deserialize(path: PathLike, contents: RawContents, deserializer: Deserializer[T], log: logging.Logger) -> T:
    try:
        value = deserializer(contents)
    except Exception as exc:
        raise DeserializeError(path, exc) from exc
    log.debug("Loaded configuration from %s", os.fspath(path))
    return value


def _produce_default(default: DefaultProvider[T]) -> T:
    if callable(default):
        return default()
    return copy.deepcopy(default)


def _serialize(path: PathLike, value: T, serializer: Serializer[T], options: LoaderOptions) -> bytes:
    try:
        payload = serializer(value)
    except Exception as exc:
        raise SerializeError(path, exc) from exc

    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    if not isinstance(payload, str):
        exc = TypeError(f"serializer returned {type(payload).__name__}, expected str or bytes")
        raise SerializeError(path, exc) from exc
    if options.binary:
        exc = TypeError("serializer returned str but the loader is in binary mode (encoding=None)")
        raise SerializeError(path, exc) from exc

    # Same translation a text-mode write performs.
    if options.newline is None:
        payload = payload.replace("\n", os.linesep)
    elif options.newline not in ("", "\n"):
        payload = payload.replace("\n", options.newline)
    try:
        return payload.encode(options.encoding, options.errors)
    except UnicodeError as exc:
        raise SerializeError(path, exc) from exc


def _write_new(path: PathLike, payload: bytes, log: logging.Logger) -> None:
    try:
        handle = open(path, "xb")
    except OSError as exc:
        raise LoadIOError(path, exc, Stage.WRITE) from exc

    try:
        with handle:
            handle.write(payload)
    except OSError as exc:
        # Remove the partial file so the path is absent again.
        with contextlib.suppress(OSError):
            os.remove(path)
        raise LoadIOError(path, exc, Stage.WRITE) from exc
    log.debug("Wrote default configuration to %s (%d bytes)", os.fspath(path), len(payload))
