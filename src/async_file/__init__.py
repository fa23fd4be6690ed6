"""Asynchronous wrappers for filesystem operations."""

__version__ = "0.1.0"

from async_file.directories import (
    PathConflictError,
    create_directory,
    delete,
    exists,
    mkdirp,
    rimraf,
)
from async_file.primitives import (
    access,
    append_file,
    chmod,
    link,
    lstat,
    mkdir,
    read_file,
    readdir,
    readlink,
    realpath,
    rename,
    rmdir,
    stat,
    symlink,
    truncate,
    unlink,
    utimes,
    write_file,
)
from async_file.protocols import FileSystem
from async_file.text import read_text_file, write_text_file
from async_file.types import Encoding, OpenFlags

__all__ = [
    "__version__",
    "Encoding",
    "FileSystem",
    "OpenFlags",
    "PathConflictError",
    "access",
    "append_file",
    "chmod",
    "create_directory",
    "delete",
    "exists",
    "link",
    "lstat",
    "mkdir",
    "mkdirp",
    "read_file",
    "read_text_file",
    "readdir",
    "readlink",
    "realpath",
    "rename",
    "rimraf",
    "rmdir",
    "stat",
    "symlink",
    "truncate",
    "unlink",
    "utimes",
    "write_file",
    "write_text_file",
]
