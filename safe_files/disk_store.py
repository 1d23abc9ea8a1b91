from __future__ import annotations

from pathlib import Path
from typing import Any

from .interfaces import FileOperations
from .operations import default_file_operations


class JsonDocumentStore:
    """
    Stores a single JSON object on disk at a fixed path.

    - ``load`` returns a dict: ``{}`` when the file is missing or holds a non-object.
    - Invalid JSON is not hidden; it raises ``ParseError``.
    - ``save`` replaces the file atomically.
    """

    def __init__(self, path: Path, files: FileOperations | None = None):
        self._path = path
        self._files = files if files is not None else default_file_operations()

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> dict[str, Any]:
        if not await self._files.exists(self._path):
            return {}
        raw = await self._files.read_json(self._path)
        return raw if isinstance(raw, dict) else {}

    async def save(self, doc: dict[str, Any]) -> None:
        await self._files.ensure_dir(self._path.parent)
        await self._files.write_json(self._path, doc, sort_keys=True, atomic=True)
