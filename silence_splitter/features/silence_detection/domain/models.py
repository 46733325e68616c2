# File: silence_splitter/features/silence_detection/domain/models.py
from dataclasses import dataclass, field
from typing import List

from silence_splitter.core.common.enums import SilenceEventKind
from silence_splitter.core.config.settings import settings

@dataclass(frozen=True)
class DetectionConfig:
    """
    Parameters for ffmpeg's silencedetect filter.
    Anything quieter than noise_db for at least min_duration seconds is silence.
    """
    noise_db: float = settings.SILENCE_NOISE_DB
    min_duration: float = settings.SILENCE_MIN_DURATION

    @property
    def filter_expression(self) -> str:
        return f"silencedetect=noise={self.noise_db:g}dB:d={self.min_duration:g}"

@dataclass(frozen=True)
class SilenceEvent:
    """
    A single silence boundary reported by the analyzer.
    """
    timestamp: float
    kind: SilenceEventKind

    def __post_init__(self):
        if self.timestamp < 0:
            raise ValueError(f"Timestamp cannot be negative: {self.timestamp}")

@dataclass
class SilenceEvents:
    """
    The two boundary streams, each in emission order.
    Kept separate on purpose: segments pair ends[i] with starts[i+1].
    """
    ends: List[float] = field(default_factory=list)
    starts: List[float] = field(default_factory=list)

    def add(self, event: SilenceEvent) -> None:
        if event.kind == SilenceEventKind.END:
            self.ends.append(event.timestamp)
        else:
            self.starts.append(event.timestamp)

    @property
    def pair_count(self) -> int:
        return max(0, min(len(self.ends), len(self.starts) - 1))

@dataclass(frozen=True)
class Segment:
    """
    A non-silent span to be written as one output file.
    `index` is the position in the derived sequence and drives output naming.
    """
    index: int
    start: float
    end: float

    @property
    def is_usable(self) -> bool:
        return self.start < self.end
