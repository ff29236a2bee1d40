"""Environment-driven settings for cart storage."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=ROOT_DIR / ".env")

DEFAULT_RESOURCES_DIR = "resources"
DEFAULT_LOG_LEVEL = "INFO"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


@dataclass(frozen=True)
class Settings:
    resources_dir: Path
    log_level: str


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        resources_dir=Path(_get_env("CART_RESOURCES_DIR", default=DEFAULT_RESOURCES_DIR)),
        log_level=(_get_env("LOG_LEVEL", default=DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
    )


__all__ = ["Settings", "get_settings", "DEFAULT_RESOURCES_DIR", "DEFAULT_LOG_LEVEL"]
