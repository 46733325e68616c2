from abc import ABC, abstractmethod
from pathlib import Path

class ISilenceProbe(ABC):
    """
    Contract for the silence analyzer.
    Abstracts the external tool (ffmpeg) from the segmentation logic.
    """

    @abstractmethod
    def probe(self, audio_path: Path) -> str:
        """
        Runs silence analysis on the file and returns the raw diagnostic text.

        Args:
            audio_path: Path to the audio file.

        Raises:
            ProbeError: If the analyzer cannot be launched or exits non-zero.
        """
        pass
