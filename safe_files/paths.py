from __future__ import annotations

from pathlib import Path

from .settings import Settings


def _under_root(settings: Settings, fragment: str) -> Path:
    # "/files/logs" style fragments are still relative to the root
    return Path(settings.root_path) / fragment.lstrip("/\\")


def logs_dir(settings: Settings) -> Path:
    return _under_root(settings, settings.logs_dir_rel)


def profiles_dir(settings: Settings) -> Path:
    return _under_root(settings, settings.profiles_dir_rel)


def log_file(settings: Settings) -> Path:
    return logs_dir(settings) / settings.log_file_name
