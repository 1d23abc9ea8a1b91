from __future__ import annotations

import os
from typing import Any, Protocol

from .models import FileStat


class FileOperations(Protocol):
    """
    Async file primitives with per-path serialization.

    ``SafeFileOperations`` is the disk implementation; anything satisfying this
    protocol can back ``JsonDocumentStore`` or ``ActivityLog``.
    """

    async def read(self, path: str | os.PathLike[str], encoding: str | None = "utf-8") -> str | bytes: ...
    async def write(
        self, path: str | os.PathLike[str], data: str | bytes, encoding: str | None = "utf-8", *, atomic: bool = False
    ) -> bool: ...
    async def append(self, path: str | os.PathLike[str], data: str | bytes, encoding: str | None = "utf-8") -> bool: ...

    async def exists(self, path: str | os.PathLike[str]) -> bool: ...
    async def ensure_dir(self, path: str | os.PathLike[str]) -> bool: ...

    async def read_json(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> Any: ...
    async def write_json(
        self,
        path: str | os.PathLike[str],
        value: Any,
        indent: int | None = 2,
        *,
        sort_keys: bool = False,
        atomic: bool = False,
    ) -> bool: ...

    async def stat(self, path: str | os.PathLike[str]) -> FileStat: ...
    async def copy(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> bool: ...
    async def delete(self, path: str | os.PathLike[str]) -> bool: ...
