# ==============================================================================
# config_utils.py  –  Tiny helper for environment-backed settings
#
# Centralizes:
#   • .env loading (real environment values win)
#   • Progress interval and input encoding for the converter
#   • Metrics port and log destination
# ==============================================================================

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ROOT_ENV = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=ROOT_ENV, override=False)  # env values override file

DEFAULT_PROGRESS_INTERVAL = 100_000
DEFAULT_INPUT_ENCODING = "utf-8"


# ------------------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------------------


def _bool_env(var_name: str, default: str = "false") -> bool:
    """Convert TRUE / true / 1 style env vars to bool."""
    return os.getenv(var_name, default).strip().lower() in {"1", "true", "yes"}


def _int_env(var_name: str, default: int) -> int:
    """Read an integer env var, failing loudly on garbage."""
    raw = os.getenv(var_name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"`{var_name}` must be an integer, got {raw!r}") from exc


# ------------------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------------------


def get_progress_interval() -> int:
    """Number of emitted games between two progress messages."""
    interval = _int_env("PROGRESS_INTERVAL", DEFAULT_PROGRESS_INTERVAL)
    if interval <= 0:
        raise RuntimeError(f"`PROGRESS_INTERVAL` must be positive, got {interval}")
    return interval


def get_input_encoding() -> str:
    """Text codec used to decode the PGN input."""
    return os.getenv("PGN_INPUT_ENCODING", DEFAULT_INPUT_ENCODING).strip()


def get_metrics_port() -> Optional[int]:
    """Return the Prometheus port (or None when metrics are disabled)."""
    port = _int_env("METRICS_PORT", 0)
    return port or None


def get_logs_dir() -> Optional[Path]:
    """Explicit log directory from `LOG_DIR`, if any."""
    raw = os.getenv("LOG_DIR")
    return Path(raw) if raw else None


def log_to_file_enabled() -> bool:
    return _bool_env("LOG_TO_FILE", "true")
