from __future__ import annotations

import enum
import functools
import os
from dataclasses import dataclass

from dotenv import load_dotenv


class DeployEnv(str, enum.Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Filesystem layout; relative fragments are joined onto root_path
    root_path: str
    logs_dir_rel: str
    profiles_dir_rel: str
    log_file_name: str

    deploy_env: DeployEnv

    # Raise on release of a lock that is not held instead of ignoring it
    strict_release: bool


def load_settings(env_file: str | None = "local.env") -> Settings:
    """
    Build settings from the environment, after loading ``env_file`` if it exists.

    Variables already set in the environment win over the file.
    """
    if env_file:
        load_dotenv(env_file)

    root_path = os.getenv("SAFE_FILES_ROOT") or os.getcwd()
    logs_dir_rel = os.getenv("SAFE_FILES_LOGS_DIR", "files/logs")
    profiles_dir_rel = os.getenv("SAFE_FILES_PROFILES_DIR", "files/profiles")
    log_file_name = os.getenv("SAFE_FILES_LOG_FILE", "log.log")

    raw_env = os.getenv("SAFE_FILES_DEPLOY_ENV", DeployEnv.DEV.value).strip().lower()
    try:
        deploy_env = DeployEnv(raw_env)
    except ValueError:
        choices = ", ".join(e.value for e in DeployEnv)
        raise ValueError(f"SAFE_FILES_DEPLOY_ENV must be one of {choices}, got {raw_env!r}") from None

    strict_release = _env_bool("SAFE_FILES_STRICT_RELEASE", False)

    return Settings(
        root_path=root_path,
        logs_dir_rel=logs_dir_rel,
        profiles_dir_rel=profiles_dir_rel,
        log_file_name=log_file_name,
        deploy_env=deploy_env,
        strict_release=strict_release,
    )


@functools.lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Settings for this process, read once on first use."""
    return load_settings()
