import subprocess
import logging
from pathlib import Path
from typing import Optional

from silence_splitter.core.exceptions import ProbeError
from silence_splitter.core.tools.locator import ToolConfig
from ..domain.interfaces import ISilenceProbe
from ..domain.models import DetectionConfig

logger = logging.getLogger(__name__)

class FFmpegSilenceProbe(ISilenceProbe):
    """
    Concrete implementation of ISilenceProbe using ffmpeg's silencedetect filter.
    Runs in analysis-only mode: decoded audio goes to the null muxer.
    """

    def __init__(self, tools: ToolConfig, config: Optional[DetectionConfig] = None):
        self.tools = tools
        self.config = config or DetectionConfig()

    def build_command(self, audio_path: Path) -> list:
        # -af: silence detection filter, writes its findings to stderr
        # -f null -: decode everything, produce no output media
        return [
            self.tools.ffmpeg_binary,
            "-i", str(audio_path),
            "-af", self.config.filter_expression,
            "-f", "null",
            "-"
        ]

    def probe(self, audio_path: Path) -> str:
        cmd = self.build_command(audio_path)
        logger.debug(f"Executing FFmpeg silencedetect: {' '.join(cmd)}")

        try:
            # ffmpeg reports silencedetect events on stderr
            proc = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace"
            )
        except OSError as e:
            logger.error(f"Could not launch ffmpeg for {audio_path}: {e}")
            raise ProbeError(audio_path, f"error running ffmpeg command: {e}") from e

        if proc.returncode != 0:
            logger.error(f"FFmpeg silencedetect failed for {audio_path} (exit {proc.returncode})")
            raise ProbeError(
                audio_path,
                f"ffmpeg exited with status {proc.returncode}",
                output=proc.stderr
            )

        return proc.stderr or ""
