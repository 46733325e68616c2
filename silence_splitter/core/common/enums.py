# File: silence_splitter/core/common/enums.py

from enum import Enum, unique

@unique
class SilenceEventKind(str, Enum):
    START = "start"
    END = "end"

@unique
class ProcessingStage(str, Enum):
    PROBING = "probing"
    PARSING = "parsing"
    NO_SILENCE = "no_silence"
    EXPORTING = "exporting"
    DONE = "done"
    FAILED = "failed"

@unique
class OutcomeStatus(str, Enum):
    COMPLETED = "completed"
    NO_SILENCE = "no_silence"
    FAILED = "failed"
