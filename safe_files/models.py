from __future__ import annotations

import os
import stat as stat_module
from datetime import datetime, timezone

from pydantic import BaseModel


def _utc(ts: float) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


class FileStat(BaseModel):
    """
    Metadata for a single filesystem entry, as returned by ``SafeFileOperations.stat``.

    ``changed_at`` is the inode change time on POSIX and the creation time on Windows.
    """

    path: str
    size: int
    mode: int
    is_file: bool
    is_dir: bool
    is_symlink: bool
    accessed_at: datetime
    modified_at: datetime
    changed_at: datetime

    @classmethod
    def from_stat_result(cls, path: str, st: os.stat_result, *, is_symlink: bool = False) -> "FileStat":
        return cls(
            path=path,
            size=st.st_size,
            mode=stat_module.S_IMODE(st.st_mode),
            is_file=stat_module.S_ISREG(st.st_mode),
            is_dir=stat_module.S_ISDIR(st.st_mode),
            is_symlink=is_symlink,
            accessed_at=_utc(st.st_atime),
            modified_at=_utc(st.st_mtime),
            changed_at=_utc(st.st_ctime),
        )
