from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileOperationError
from .interfaces import FileOperations
from .operations import default_file_operations
from .paths import log_file, logs_dir
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ActivityLog:
    """
    Append-only, best-effort text log under ``<root>/<logs_dir_rel>/<log_file_name>``.

    Lines go through the path lock, so concurrent writers never interleave.
    Failures are reported via ``logging`` and never raised to the caller.
    """

    def __init__(self, settings: Settings | None = None, files: FileOperations | None = None) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._files = files if files is not None else default_file_operations()

    @property
    def path(self) -> Path:
        return log_file(self._settings)

    async def log(self, text: str) -> None:
        try:
            await self._files.ensure_dir(logs_dir(self._settings))
            await self._files.append(self.path, text + "\n", "utf-8")
        except FileOperationError as exc:
            logger.warning("Failed to write to log %s: %s", exc.path, exc.cause)
        except Exception:
            # best-effort: a broken backend must not reach the caller either
            logger.exception("Failed to write to log %s", self.path)
