from __future__ import annotations

import asyncio
import contextlib
import functools
import os
import shutil
from pathlib import Path
from typing import Any

from .errors import (
    AppendError,
    CopyError,
    DeleteError,
    DirError,
    ParseError,
    ReadError,
    SerializeError,
    StatError,
    WriteError,
)
from .json_store import dump_json, parse_json
from .locks import PathLockRegistry
from .models import FileStat
from .settings import get_settings

PathLike = str | os.PathLike[str]
Payload = str | bytes


def _encode(data: Payload, encoding: str | None) -> bytes:
    if isinstance(data, bytes):
        return data
    return data.encode(encoding or "utf-8")


def _read_file(path: str, encoding: str | None) -> Payload:
    raw = Path(path).read_bytes()
    return raw if encoding is None else raw.decode(encoding)


def _tmp_path(path: str) -> Path:
    target = Path(path)
    return target.with_suffix(target.suffix + ".tmp")


def _write_file(path: str, data: bytes, *, atomic: bool) -> None:
    target = Path(path)
    if not atomic:
        target.write_bytes(data)
        return

    tmp_path = _tmp_path(path)
    try:
        tmp_path.write_bytes(data)
        tmp_path.replace(target)
    except OSError:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise


def _append_file(path: str, data: bytes) -> None:
    with open(path, "ab") as f:
        f.write(data)


def _stat_file(path: str) -> FileStat:
    return FileStat.from_stat_result(path, os.stat(path), is_symlink=os.path.islink(path))


class SafeFileOperations:
    """
    File primitives that never overlap on the same path.

    Every locked operation takes the path lock, runs the blocking call in a
    worker thread (``asyncio.to_thread``) and releases the lock on the way
    out, whatever happened. Failures surface as ``FileOperationError``
    subclasses chained to the original exception.

    ``exists`` and ``ensure_dir`` do not take the lock.
    """

    def __init__(self, locks: PathLockRegistry | None = None) -> None:
        self._locks = locks if locks is not None else PathLockRegistry()

    @property
    def locks(self) -> PathLockRegistry:
        return self._locks

    async def read(self, path: PathLike, encoding: str | None = "utf-8") -> Payload:
        target = os.path.abspath(path)
        async with self._locks.hold(path):
            try:
                return await asyncio.to_thread(_read_file, target, encoding)
            except (OSError, ValueError, LookupError) as exc:
                raise ReadError("read", path, exc) from exc

    async def write(self, path: PathLike, data: Payload, encoding: str | None = "utf-8", *, atomic: bool = False) -> bool:
        target = os.path.abspath(path)
        # atomic writes also own the temp sibling they stage through
        held = (path, _tmp_path(target)) if atomic else (path,)
        async with self._locks.hold(*held):
            try:
                await asyncio.to_thread(_write_file, target, _encode(data, encoding), atomic=atomic)
            except (OSError, UnicodeEncodeError, LookupError) as exc:
                raise WriteError("write", path, exc) from exc
        return True

    async def append(self, path: PathLike, data: Payload, encoding: str | None = "utf-8") -> bool:
        target = os.path.abspath(path)
        async with self._locks.hold(path):
            try:
                await asyncio.to_thread(_append_file, target, _encode(data, encoding))
            except (OSError, UnicodeEncodeError, LookupError) as exc:
                raise AppendError("append", path, exc) from exc
        return True

    async def exists(self, path: PathLike) -> bool:
        # os.path.exists already maps OSError/ValueError to False.
        return await asyncio.to_thread(os.path.exists, path)

    async def ensure_dir(self, path: PathLike) -> bool:
        try:
            await asyncio.to_thread(os.makedirs, path, exist_ok=True)
        except OSError as exc:
            raise DirError("ensure_dir", path, exc) from exc
        return True

    async def read_json(self, path: PathLike, encoding: str = "utf-8") -> Any:
        raw = await self.read(path, None)
        try:
            return parse_json(raw, encoding)
        except (ValueError, LookupError) as exc:
            raise ParseError("read_json", path, exc) from exc

    async def write_json(
        self,
        path: PathLike,
        value: Any,
        indent: int | None = 2,
        *,
        sort_keys: bool = False,
        atomic: bool = False,
    ) -> bool:
        try:
            text = dump_json(value, indent=indent, sort_keys=sort_keys)
        except (TypeError, ValueError) as exc:
            raise SerializeError("write_json", path, exc) from exc
        return await self.write(path, text, atomic=atomic)

    async def stat(self, path: PathLike) -> FileStat:
        target = os.path.abspath(path)
        async with self._locks.hold(path):
            try:
                return await asyncio.to_thread(_stat_file, target)
            except OSError as exc:
                raise StatError("stat", path, exc) from exc

    async def copy(self, source: PathLike, destination: PathLike) -> bool:
        src = os.path.abspath(source)
        dst = os.path.abspath(destination)
        async with self._locks.hold(source, destination):
            try:
                await asyncio.to_thread(shutil.copyfile, src, dst)
            except OSError as exc:
                raise CopyError("copy", source, destination, exc) from exc
        return True

    async def delete(self, path: PathLike) -> bool:
        target = os.path.abspath(path)
        async with self._locks.hold(path):
            try:
                await asyncio.to_thread(os.unlink, target)
            except OSError as exc:
                raise DeleteError("delete", path, exc) from exc
        return True


@functools.lru_cache(maxsize=None)
def default_file_operations() -> SafeFileOperations:
    """Process-wide instance sharing one lock table; created on first call."""
    return SafeFileOperations(PathLockRegistry(strict=get_settings().strict_release))
