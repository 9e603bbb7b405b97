"""File path values.

``FilePath`` wraps a normalized path and adds file-name accessors,
transformations that derive new paths, and best-effort filesystem queries.
Every transformation returns a new value; instances are never mutated, so
they are safe to use as mapping keys and to share between threads.

Extension rules follow Python's host convention: a dot at the start of the
file name (``.gitignore``) does not begin an extension, and a trailing dot
(``file.``) does not leave a usable one.

Construction policies:
- ``FilePath(path, ...)`` raises ``MissingArgumentError`` for ``path=None``
  but accepts blank strings (which normalize to ``"."``).
- ``FilePath.from_string`` / ``FilePath.from_uri`` return ``None`` for blank
  input instead of raising.
"""

from __future__ import annotations

from typing import Optional

from ..errors import require
from ..platform import FilePermission, get_platform
from .collapse import collapse
from .directory_path import DirectoryPath
from .normalized import NormalizedPath


def _extension_dot(name: str) -> int:
    """Index of the dot that starts ``name``'s extension, or -1."""
    dot = name.rfind(".")
    return dot if dot > 0 else -1


class FilePath(NormalizedPath):
    """A file location, local or provider-backed."""

    __slots__ = ()

    # --- Derived accessors ---

    @property
    def file_name(self) -> str:
        """Last ``/``-delimited segment; may be empty for a bare root."""
        return self.full_path.rpartition("/")[2]

    @property
    def has_extension(self) -> bool:
        name = self.file_name
        dot = _extension_dot(name)
        return dot != -1 and dot < len(name) - 1

    @property
    def extension(self) -> Optional[str]:
        """Extension including its leading dot, or None."""
        if not self.has_extension:
            return None
        name = self.file_name
        extension = name[_extension_dot(name):]
        return extension if extension[1:].strip() else None

    @property
    def file_name_without_extension(self) -> Optional[str]:
        """File name minus its extension, or None if nothing remains."""
        name = self.file_name
        dot = _extension_dot(name)
        stem = name[:dot] if dot != -1 else name
        return stem or None

    @property
    def directory(self) -> DirectoryPath:
        """Containing directory, ``"."`` when the path has no directory part."""
        head, sep, _ = self.full_path.rpartition("/")
        if not sep:
            directory = "."
        else:
            directory = head or "/"
        if not directory.strip():
            directory = "."
        return DirectoryPath(directory, provider=self.file_provider)

    # --- Transformations ---

    def change_extension(self, extension: Optional[str]) -> "FilePath":
        """Replace the extension; ``None`` removes it.

        A missing leading dot is added, so ``"txt"`` and ``".txt"`` agree.
        """
        name_start = self.full_path.rfind("/") + 1
        dot = self.full_path.rfind(".")
        base = self.full_path[:dot] if dot > name_start else self.full_path

        if extension is None:
            return self._derive(base)
        if not extension.startswith("."):
            extension = "." + extension
        return self._derive(base + extension)

    def append_extension(self, extension: str) -> "FilePath":
        """Append ``extension`` after the full path without replacing anything."""
        require(extension, "extension")
        if not extension.startswith("."):
            extension = "." + extension
        return self._derive(self.full_path + extension)

    def insert_suffix(self, suffix: str) -> "FilePath":
        """Insert ``suffix`` before the last dot of the path.

        The search covers the whole path, not only the file name: for
        ``a.d/file`` the suffix lands in the directory part. With no dot at all
        the suffix is appended.
        """
        require(suffix, "suffix")
        dot = self.full_path.rfind(".")
        if dot == -1:
            return self._derive(self.full_path + suffix)
        return self._derive(self.full_path[:dot] + suffix + self.full_path[dot:])

    def insert_prefix(self, prefix: str) -> "FilePath":
        """Insert ``prefix`` at the start of the file name."""
        require(prefix, "prefix")
        slash = self.full_path.rfind("/")
        if slash == -1:
            return self._derive(prefix + self.full_path)
        return self._derive(
            self.full_path[: slash + 1] + prefix + self.full_path[slash + 1 :]
        )

    def collapse(self) -> "FilePath":
        """Resolve ``.`` and ``..`` segments without touching the filesystem."""
        return self._derive(collapse(self.full_path))

    # --- Filesystem queries ---

    def exists(self) -> bool:
        """True if a file exists at this path.

        Never raises: permission problems, invalid paths and directories all
        report False. The answer may be stale by the time it is used.
        """
        return get_platform().file_exists(self.full_path)

    def is_locked(self) -> bool:
        """True if another handle holds a conflicting lock on the file.

        Raises:
            OSError: For any failure that is not lock contention, such as a
                missing file
        """
        return get_platform().is_locked(self.full_path)

    def has_permission(self, permission: FilePermission) -> bool:
        """True if every right in ``permission`` is granted.

        Windows hosts consult the file's ACL for the built-in Users group;
        POSIX hosts run one combined access check for the effective user.
        The two answers can differ for the same logical setup.
        """
        return get_platform().has_permission(self.full_path, permission)


def from_string(path: Optional[str]) -> Optional[FilePath]:
    return FilePath.from_string(path)


def from_uri(uri: Optional[str]) -> Optional[FilePath]:
    return FilePath.from_uri(uri)


__all__ = ["FilePath", "from_string", "from_uri"]
