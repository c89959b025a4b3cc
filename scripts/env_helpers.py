"""Shared helpers for loading .env-style files into the environment. Uses python-dotenv."""

import os
from pathlib import Path

from dotenv import dotenv_values

# Workspace root (parent of scripts/).
WORKSPACE_ROOT = Path(__file__).resolve().parent.parent


def default_env_path() -> Path:
    """Path to the deployment .env file (BUCKET_NAME, AWS_REGION, ...)."""
    return WORKSPACE_ROOT / ".env"


def load_env(path: str | Path) -> dict[str, str | None]:
    """Read a .env-style file into a dict. A missing file reads as empty."""
    path = Path(path)
    if not path.exists():
        return {}
    return dict(dotenv_values(path))


def apply_env(values: dict[str, str | None]) -> None:
    """Set UPPERCASE keys into os.environ without overriding values already set."""
    for key, value in values.items():
        if value is not None:
            os.environ.setdefault(key.upper(), value)
