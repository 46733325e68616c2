# File: silence_splitter/core/config/settings.py

import os
import logging
from typing import List, Optional, FrozenSet

logger = logging.getLogger(__name__)

# Env vars that could not be parsed; the default was used instead.
_invalid_env: List[str] = []


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if not value:
        return default
    try:
        return cast(value)
    except ValueError:
        message = f"{name}={value!r} is not a valid {cast.__name__}"
        logger.warning(f"{message}, using {default}")
        _invalid_env.append(message)
        return default


def _env_int(name: str, default: int) -> int:
    return _env_number(name, default, int)


def _env_float(name: str, default: float) -> float:
    return _env_number(name, default, float)


class Settings:
    # --- External Tools ---
    # Explicit override. When unset, the locator searches the working dir, then PATH.
    FFMPEG_BINARY: Optional[str] = os.getenv("FFMPEG_BINARY_PATH")

    # --- Silence Detection ---
    # ffmpeg silencedetect: noise floor in dB and minimum silence length in seconds
    SILENCE_NOISE_DB: float = _env_float("SILENCE_NOISE_DB", -30.0)
    SILENCE_MIN_DURATION: float = _env_float("SILENCE_MIN_DURATION", 1.0)

    # --- Files ---
    INPUT_EXTENSIONS: FrozenSet[str] = frozenset({".mp3"})
    OUTPUT_EXTENSION: str = "mp3"

    # --- Pipeline ---
    JOB_QUEUE_CAPACITY: int = 100
    RESULT_QUEUE_CAPACITY: int = 100
    WORKER_COUNT: int = _env_int("SPLITTER_WORKERS", os.cpu_count() or 1)

    # --- Outcome Ledger ---
    # Unset means outcomes are only logged, never persisted.
    LEDGER_DATABASE_URL: Optional[str] = os.getenv("LEDGER_DATABASE_URL")

    # Non-empty when the environment held unparseable values
    INVALID_ENV: List[str] = _invalid_env


settings = Settings()
