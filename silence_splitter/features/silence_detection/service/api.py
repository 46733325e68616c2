from pathlib import Path
from typing import List, Optional

from silence_splitter.core.tools.locator import ToolConfig
from ..domain.models import DetectionConfig, Segment
from ..data.ffmpeg_probe import FFmpegSilenceProbe
from ..data.silence_parser import parse_segments

def detect_segments(audio_path: str, tools: ToolConfig,
                    config: Optional[DetectionConfig] = None) -> List[Segment]:
    """
    Public Service API: Probe a file and derive its non-silent segments.

    Args:
        audio_path: Path to the audio file.
        tools: Resolved ffmpeg location.
        config: Silence threshold settings (defaults: -30dB, 1s).

    Returns:
        Ordered segments; empty when no silence pairing was found.
    """
    probe = FFmpegSilenceProbe(tools, config)
    output = probe.probe(Path(audio_path))
    return parse_segments(output)
