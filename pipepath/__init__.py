"""pipepath: immutable, provider-aware file and directory path values."""

from .errors import MissingArgumentError, PathInputError
from .paths import (
    DirectoryPath,
    FilePath,
    NormalizedPath,
    PathKind,
    collapse,
    from_string,
    from_uri,
)
from .platform import FilePermission, get_platform

__version__ = "0.1.0"

__all__ = [
    "DirectoryPath",
    "FilePath",
    "NormalizedPath",
    "PathKind",
    "FilePermission",
    "collapse",
    "from_string",
    "from_uri",
    "get_platform",
    "PathInputError",
    "MissingArgumentError",
]
