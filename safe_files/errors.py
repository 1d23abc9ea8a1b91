from __future__ import annotations

import os


class FileOperationError(Exception):
    """
    Raised by every safe file operation when the underlying call fails.

    Carries the operation name, the path as given by the caller, and the
    original exception (also chained as ``__cause__``).
    """

    verb = "access"

    def __init__(self, operation: str, path: str | os.PathLike[str], cause: BaseException):
        self.operation = operation
        self.path = os.fspath(path)
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"Failed to {self.verb} {self.path}: {self.cause}"


class ReadError(FileOperationError):
    verb = "read file"


class WriteError(FileOperationError):
    verb = "write file"


class AppendError(FileOperationError):
    verb = "append to file"


class ParseError(FileOperationError):
    verb = "parse JSON from"


class SerializeError(FileOperationError):
    verb = "serialize JSON for"


class StatError(FileOperationError):
    verb = "get stats for"


class DeleteError(FileOperationError):
    verb = "delete file"


class DirError(FileOperationError):
    verb = "create directory"


class CopyError(FileOperationError):
    def __init__(
        self,
        operation: str,
        path: str | os.PathLike[str],
        destination: str | os.PathLike[str],
        cause: BaseException,
    ):
        self.destination = os.fspath(destination)
        super().__init__(operation, path, cause)

    def _describe(self) -> str:
        return f"Failed to copy {self.path} to {self.destination}: {self.cause}"


class LockReleaseError(RuntimeError):
    """Raised by a strict registry when a path is released without being held."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Released lock that is not held: {path}")
