from __future__ import annotations

import asyncio
import collections
import contextlib
import logging
import os
from pathlib import Path
from typing import AsyncIterator

from .errors import LockReleaseError

logger = logging.getLogger(__name__)


def canonical_path(path: str | os.PathLike[str]) -> str:
    """Absolute, normalized key for ``path``; symlinks and ``..`` are resolved."""
    return str(Path(path).expanduser().resolve())


class PathLockRegistry:
    """
    Serializes async operations per normalized file path within one process.

    A key is in the table only while some operation holds it. Each entry keeps
    the queue of tasks waiting for that path; release hands the lock straight
    to the oldest waiter, so waiters are served in arrival order.

    A holder that never releases blocks its path until the process exits.
    There is no lease or timeout.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict
        self._held: dict[str, collections.deque[asyncio.Future[None]]] = {}

    def __len__(self) -> int:
        return len(self._held)

    def is_locked(self, path: str | os.PathLike[str]) -> bool:
        return canonical_path(path) in self._held

    def held_paths(self) -> list[str]:
        return sorted(self._held)

    async def acquire(self, path: str | os.PathLike[str]) -> str:
        key = canonical_path(path)
        waiters = self._held.get(key)
        if waiters is None:
            # Check and insert happen without an await in between.
            self._held[key] = collections.deque()
            return key

        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        waiters.append(waiter)
        logger.debug("Waiting for lock on %s (%d queued)", key, len(waiters))
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                # Ownership was handed over just before the cancel landed.
                self.release(key)
            else:
                with contextlib.suppress(ValueError):
                    waiters.remove(waiter)
            raise
        return key

    def release(self, path: str | os.PathLike[str]) -> None:
        key = canonical_path(path)
        waiters = self._held.get(key)
        if waiters is None:
            if self._strict:
                raise LockReleaseError(key)
            logger.debug("Release of unheld path %s ignored", key)
            return

        while waiters:
            waiter = waiters.popleft()
            if not waiter.done():
                waiter.set_result(None)
                logger.debug("Handed lock on %s to next waiter", key)
                return
        del self._held[key]

    @contextlib.asynccontextmanager
    async def hold(self, *paths: str | os.PathLike[str]) -> AsyncIterator[list[str]]:
        """
        Hold every given path for the duration of the block.

        Paths are de-duplicated and taken in lexical order of their canonical
        keys, so two callers locking the same pair can never wait on each other.
        """
        keys = sorted({canonical_path(p) for p in paths})
        acquired: list[str] = []
        try:
            for key in keys:
                acquired.append(await self.acquire(key))
            yield keys
        finally:
            for key in reversed(acquired):
                self.release(key)
