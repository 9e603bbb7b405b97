"""Canonical path values shared by FilePath and DirectoryPath.

A normalized path is a forward-slash string plus an optional file provider
(``scheme://authority`` of a non-local source; ``None`` for local disk) and an
absoluteness flag fixed at construction. No filesystem I/O is performed here.

Normalization rules:
- surrounding whitespace is stripped; an empty string becomes ``"."``
- backslashes become forward slashes and separator runs collapse to one
- a leading ``./`` is dropped when something follows it
- trailing separators are trimmed (a lone ``/`` stays ``/``)
- a bare drive such as ``C:`` gains a trailing ``/`` on Windows hosts
"""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Optional, Tuple
from urllib.parse import unquote, urlsplit

from ..errors import PathInputError, require
from ._types import PathKind

if TYPE_CHECKING:
    from .directory_path import DirectoryPath

IS_WINDOWS = os.name == "nt"

_SEPARATOR_RUN = re.compile(r"[\\/]+")
_BARE_DRIVE = re.compile(r"[A-Za-z]:")
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")
_URI_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


def normalize_path_string(path: str, *, windows: bool = IS_WINDOWS) -> str:
    """Return ``path`` in canonical forward-slash form.

    A bare drive (``C:``) gains a trailing ``/`` only on Windows hosts; elsewhere
    it is an ordinary relative name.
    """
    candidate = _SEPARATOR_RUN.sub("/", path.strip())

    while candidate.startswith("./") and len(candidate) > 2:
        candidate = candidate[2:]

    if len(candidate) > 1:
        candidate = candidate.rstrip("/")

    if windows and _BARE_DRIVE.fullmatch(candidate):
        candidate += "/"

    return candidate or "."


def normalize_provider(provider: Optional[str]) -> Optional[str]:
    """Canonicalize a file provider to ``scheme://authority``.

    Raises:
        PathInputError: If the provider is not an absolute URI
    """
    if provider is None:
        return None
    if not isinstance(provider, str):
        raise PathInputError("file provider must be a string")

    parts = urlsplit(provider.strip())
    if not parts.scheme:
        raise PathInputError(f"file provider must be an absolute URI: {provider!r}")
    return f"{parts.scheme.lower()}://{parts.netloc}"


def is_rooted(path: str, *, windows: bool = IS_WINDOWS) -> bool:
    """Host rooting rule used for ``PathKind.RELATIVE_OR_ABSOLUTE``."""
    if path.startswith("/"):
        return True
    return windows and bool(_DRIVE_PREFIX.match(path))


def path_root(path: str, *, windows: bool = IS_WINDOWS) -> str:
    """Return the root prefix of a normalized path, or ``""`` if it has none.

    POSIX hosts only know ``/``. Windows hosts also report drive roots:
    ``C:/`` for ``C:/x`` and ``C:`` for the drive-relative ``C:x``.
    """
    if windows:
        drive = _DRIVE_PREFIX.match(path)
        if drive:
            prefix = drive.group(0)
            return prefix + "/" if path[len(prefix):].startswith("/") else prefix
    return "/" if path.startswith("/") else ""


def split_uri(uri: str) -> Tuple[Optional[str], str]:
    """Split a URI into ``(provider, local_path)``.

    ``file:`` URIs without an authority (or with ``localhost``) are local,
    so their provider is ``None``. A single-letter scheme is a Windows drive
    and the whole string is returned as a local path.

    Raises:
        PathInputError: If the URI has no scheme
    """
    raw = uri.strip()
    parts = urlsplit(raw)

    if len(parts.scheme) == 1:
        return None, raw
    if not parts.scheme:
        raise PathInputError(f"uri must be absolute: {uri!r}")

    local_path = unquote(parts.path)
    scheme = parts.scheme.lower()
    if scheme == "file" and parts.netloc.lower() in ("", "localhost"):
        if IS_WINDOWS and _URI_DRIVE_PATH.match(local_path):
            local_path = local_path[1:]
        return None, local_path
    return f"{scheme}://{parts.netloc}", local_path


class NormalizedPath:
    """Immutable path value compared by content.

    Two paths are equal when they belong to the same path family (file or
    directory) and share ``full_path``, ``file_provider`` and ``is_absolute``.
    Comparison is ordinal: no case folding is applied.

    Raises:
        MissingArgumentError: If ``path`` is None
        PathInputError: If ``kind`` is not a PathKind, the provider is not an
            absolute URI, or a provider is combined with ``PathKind.RELATIVE``
    """

    __slots__ = ("_full_path", "_file_provider", "_is_absolute")

    def __init__(
        self,
        path: str,
        kind: PathKind = PathKind.RELATIVE_OR_ABSOLUTE,
        provider: Optional[str] = None,
    ) -> None:
        require(path, "path")
        if not isinstance(path, str):
            raise PathInputError("path must be a string")
        if not isinstance(kind, PathKind):
            raise PathInputError(f"kind must be a PathKind, got {kind!r}")

        file_provider = normalize_provider(provider)
        if file_provider is not None and kind is PathKind.RELATIVE:
            raise PathInputError("a file provider cannot be specified for a relative path")

        full_path = normalize_path_string(path)
        if kind is PathKind.RELATIVE_OR_ABSOLUTE:
            is_absolute = is_rooted(full_path)
        else:
            is_absolute = kind is PathKind.ABSOLUTE

        object.__setattr__(self, "_full_path", full_path)
        object.__setattr__(self, "_file_provider", file_provider)
        object.__setattr__(self, "_is_absolute", is_absolute)

    @classmethod
    def from_string(cls, path: Optional[str]):
        """Build a path from a string, or return None for blank input."""
        if path is None:
            return None
        if not isinstance(path, str):
            raise PathInputError("path must be a string")
        if not path.strip():
            return None
        return cls(path)

    @classmethod
    def from_uri(cls, uri: Optional[str]):
        """Build a path from a URI, or return None when its local path is blank.

        The provider is the URI's scheme and authority; the path is its
        unquoted path component.
        """
        if uri is None:
            return None
        if not isinstance(uri, str):
            raise PathInputError("uri must be a string")
        if not uri.strip():
            return None
        provider, local_path = split_uri(uri)
        if not local_path.strip():
            return None
        return cls(local_path, provider=provider)

    @property
    def full_path(self) -> str:
        return self._full_path

    @property
    def file_provider(self) -> Optional[str]:
        return self._file_provider

    @property
    def is_absolute(self) -> bool:
        return self._is_absolute

    @property
    def is_local(self) -> bool:
        return self._file_provider is None

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self._full_path.split("/"))

    @property
    def root(self) -> "DirectoryPath":
        """Root directory of this path; ``"."`` when it cannot be determined."""
        from .directory_path import DirectoryPath

        directory = self._root_prefix() if self._is_absolute else "."
        if not directory.strip():
            directory = "."
        return DirectoryPath(directory, provider=self._file_provider)

    @property
    def root_relative(self):
        """This path expressed relative to its own root.

        Relative paths are returned as-is. So is an absolute path whose root
        cannot be determined on this host, or which is nothing but its root.
        The result of a real projection is relative and carries no provider.
        """
        if not self._is_absolute:
            return self

        root = self._root_prefix()
        if not root.strip():
            return self

        remainder = self._full_path[len(root):]
        if not remainder.strip():
            return self
        return type(self)(remainder, PathKind.RELATIVE)

    def _root_prefix(self) -> str:
        return path_root(self._full_path)

    def _derive(self, path: str):
        return type(self)(path, provider=self._file_provider)

    def with_provider(self, provider: Optional[str]):
        """Return the same path string bound to ``provider``."""
        return type(self)(self._full_path, provider=provider)

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _key(self) -> Tuple[str, Optional[str], bool]:
        return (self._full_path, self._file_provider, self._is_absolute)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self._key()))

    def __str__(self) -> str:
        if self._file_provider is None:
            return self._full_path
        separator = "" if self._full_path.startswith("/") else "/"
        return f"{self._file_provider}{separator}{self._full_path}"

    def __repr__(self) -> str:
        if self._file_provider is None:
            return f"{type(self).__name__}({self._full_path!r})"
        return f"{type(self).__name__}({self._full_path!r}, provider={self._file_provider!r})"

    def __fspath__(self) -> str:
        # Provider-backed paths have no meaning to the local filesystem.
        if self._file_provider is not None:
            raise TypeError(f"{self!r} is not a local path")
        return self._full_path

    def __reduce__(self):
        kind = PathKind.ABSOLUTE if self._is_absolute else PathKind.RELATIVE
        if self._file_provider is not None and kind is PathKind.RELATIVE:
            kind = PathKind.RELATIVE_OR_ABSOLUTE
        return (type(self), (self._full_path, kind, self._file_provider))


__all__ = [
    "NormalizedPath",
    "normalize_path_string",
    "normalize_provider",
    "is_rooted",
    "path_root",
    "split_uri",
    "IS_WINDOWS",
]
