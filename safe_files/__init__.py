from __future__ import annotations

from .activity_log import ActivityLog
from .disk_store import JsonDocumentStore
from .errors import (
    AppendError,
    CopyError,
    DeleteError,
    DirError,
    FileOperationError,
    LockReleaseError,
    ParseError,
    ReadError,
    SerializeError,
    StatError,
    WriteError,
)
from .interfaces import FileOperations
from .locks import PathLockRegistry, canonical_path
from .models import FileStat
from .operations import SafeFileOperations, default_file_operations
from .settings import DeployEnv, Settings, get_settings, load_settings

__all__ = [
    "ActivityLog",
    "JsonDocumentStore",
    "FileOperations",
    "SafeFileOperations",
    "default_file_operations",
    "PathLockRegistry",
    "canonical_path",
    "FileStat",
    "Settings",
    "DeployEnv",
    "load_settings",
    "get_settings",
    "FileOperationError",
    "ReadError",
    "WriteError",
    "AppendError",
    "ParseError",
    "SerializeError",
    "StatError",
    "CopyError",
    "DeleteError",
    "DirError",
    "LockReleaseError",
]
