"""Path value types."""

from ._types import PathKind
from .normalized import NormalizedPath
from .directory_path import DirectoryPath
from .file_path import FilePath, from_string, from_uri
from .collapse import collapse

__all__ = [
    "PathKind",
    "NormalizedPath",
    "DirectoryPath",
    "FilePath",
    "from_string",
    "from_uri",
    "collapse",
]
