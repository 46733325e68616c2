import subprocess
import logging
from pathlib import Path
from typing import List, Optional

from silence_splitter.core.exceptions import ExportError
from silence_splitter.core.shared_types import MediaFile
from silence_splitter.core.tools.locator import ToolConfig
from silence_splitter.features.silence_detection.domain.models import Segment
from ..domain.interfaces import ISegmentExporter
from ..domain.models import ExportConfig, ExportResult

logger = logging.getLogger(__name__)


def build_output_path(source_path: Path, index: int, config: Optional[ExportConfig] = None) -> Path:
    """
    Naming: <dir>/<stem>_part_<NNN>.<ext>, e.g. lecture.mp3 -> lecture_part_007.mp3
    """
    config = config or ExportConfig()
    source = MediaFile(source_path)
    filename = f"{source.stem}_part_{index:0{config.index_width}d}.{config.output_extension}"
    return source.sibling(filename).path


class FFmpegSegmentExporter(ISegmentExporter):
    """
    Concrete implementation of ISegmentExporter using FFmpeg.
    Cuts with stream copy, so the payload is never re-encoded.
    """

    def __init__(self, tools: ToolConfig, config: Optional[ExportConfig] = None):
        self.tools = tools
        self.config = config or ExportConfig()

    def build_command(self, source_path: Path, segment: Segment, output_path: Path) -> list:
        # -y: overwrite parts left by an earlier run
        # -ss / -to: segment bounds in seconds (fixed-point)
        # -c copy: stream copy, no re-encode
        return [
            self.tools.ffmpeg_binary,
            "-y",
            "-i", str(source_path),
            "-ss", f"{segment.start:f}",
            "-to", f"{segment.end:f}",
            "-c", "copy",
            str(output_path)
        ]

    def export_segments(self, source_path: Path, segments: List[Segment]) -> ExportResult:
        result = ExportResult(source_path=source_path)

        # Sequential on purpose: every cut reads the same source into the same directory
        for segment in segments:
            output_path = build_output_path(source_path, segment.index, self.config)
            cmd = self.build_command(source_path, segment, output_path)
            logger.debug(f"Executing FFmpeg segment cut: {' '.join(cmd)}")

            try:
                subprocess.run(
                    cmd,
                    check=True,
                    stdin=subprocess.DEVNULL,
                    capture_output=True,
                    text=True,
                    errors="replace"
                )
            except subprocess.CalledProcessError as e:
                error_message = e.stderr.strip() if e.stderr else str(e)
                logger.error(f"FFmpeg segment {segment.index} of {source_path} failed. STDERR: {error_message}")
                raise ExportError(source_path, segment.index, error_message) from e
            except OSError as e:
                logger.error(f"Could not launch ffmpeg for segment {segment.index} of {source_path}: {e}")
                raise ExportError(source_path, segment.index, str(e)) from e

            result.output_paths.append(output_path)

        return result
