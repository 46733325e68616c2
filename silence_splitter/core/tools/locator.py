# File: silence_splitter/core/tools/locator.py

import os
import shutil
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from silence_splitter.core.config.settings import settings
from silence_splitter.core.exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)

# Checked in order inside the search directory before falling back to PATH
LOCAL_CANDIDATES = ("ffmpeg", "ffmpeg.exe")


@dataclass(frozen=True)
class ToolConfig:
    """
    Resolved external tooling.
    Built once at startup and handed to every adapter that launches ffmpeg.
    """
    ffmpeg_binary: str


def locate_ffmpeg(search_dir: Optional[Path] = None) -> Optional[str]:
    """
    Finds an ffmpeg executable.

    Looks for a local copy in `search_dir` (default: current working directory)
    first, then on PATH. Returns the path or None.
    """
    base = Path(search_dir) if search_dir is not None else Path(os.getcwd())

    for name in LOCAL_CANDIDATES:
        candidate = base / name
        if candidate.exists():
            return str(candidate.resolve())

    return shutil.which("ffmpeg")


def resolve_toolchain(explicit_binary: Optional[str] = None,
                      search_dir: Optional[Path] = None) -> ToolConfig:
    """
    Startup step: resolves ffmpeg exactly once.

    Raises:
        ToolNotFoundError: If no usable binary can be found.
    """
    binary = explicit_binary or settings.FFMPEG_BINARY

    if binary:
        if not Path(binary).exists() and shutil.which(binary) is None:
            raise ToolNotFoundError(f"Configured ffmpeg binary not found: {binary}")
    else:
        binary = locate_ffmpeg(search_dir)

    if not binary:
        raise ToolNotFoundError(
            "ffmpeg not found. Please install ffmpeg and ensure it's in your PATH "
            "or in the current directory."
        )

    logger.info(f"Using ffmpeg from: {binary}")
    return ToolConfig(ffmpeg_binary=binary)
