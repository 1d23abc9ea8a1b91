from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from safe_files import DeployEnv, PathLockRegistry, SafeFileOperations, Settings  # noqa: E402


@pytest.fixture
def locks() -> PathLockRegistry:
    return PathLockRegistry()


@pytest.fixture
def files(locks: PathLockRegistry) -> SafeFileOperations:
    """A fresh operations instance with its own lock table, so tests never share state."""
    return SafeFileOperations(locks)


@pytest.fixture
def sandbox_settings(tmp_path: Path) -> Settings:
    return Settings(
        root_path=str(tmp_path),
        logs_dir_rel="/files/logs",
        profiles_dir_rel="/files/profiles",
        log_file_name="log.log",
        deploy_env=DeployEnv.DEV,
        strict_release=False,
    )
