"""Directory path values with joining and parent navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from ..errors import require
from .collapse import collapse
from .normalized import NormalizedPath

if TYPE_CHECKING:
    from .file_path import FilePath


class DirectoryPath(NormalizedPath):
    """A directory location, local or provider-backed."""

    __slots__ = ()

    @property
    def name(self) -> str:
        """Last segment of the path; a root directory reports its full path."""
        if self.full_path == self._root_prefix():
            return self.full_path
        return self.full_path.rpartition("/")[2]

    @property
    def parent(self) -> Optional["DirectoryPath"]:
        """Containing directory, or None at a root and for ``"."``."""
        if self.full_path == "." or self.full_path == self._root_prefix():
            return None

        head, sep, _ = self.full_path.rpartition("/")
        if not sep:
            return self._derive(".")
        return self._derive(head or "/")

    def combine_file(self, path: "FilePath") -> "FilePath":
        """Join a relative file path onto this directory.

        Absolute file paths are returned unchanged. The result carries this
        directory's provider.
        """
        from .file_path import FilePath

        require(path, "path")
        if path.is_absolute:
            return path
        return FilePath(self._join(path.full_path), provider=self.file_provider)

    def combine(self, path: "DirectoryPath") -> "DirectoryPath":
        """Join a relative directory path onto this one."""
        require(path, "path")
        if path.is_absolute:
            return path
        return self._derive(self._join(path.full_path))

    def get_file_path(self, name: str) -> "FilePath":
        from .file_path import FilePath

        return self.combine_file(FilePath(require(name, "name")))

    def collapse(self) -> "DirectoryPath":
        return self._derive(collapse(self.full_path))

    def _join(self, other: str) -> str:
        if self.full_path == ".":
            return other
        if self.full_path.endswith("/"):
            return self.full_path + other
        return f"{self.full_path}/{other}"

    def __truediv__(self, other: Union[str, "FilePath"]) -> "FilePath":
        from .file_path import FilePath

        if isinstance(other, str):
            other = FilePath(other)
        if not isinstance(other, FilePath):
            return NotImplemented
        return self.combine_file(other)


__all__ = ["DirectoryPath"]
