import re
import logging
from typing import List

from silence_splitter.core.common.enums import SilenceEventKind
from ..domain.models import SilenceEvent, SilenceEvents, Segment

logger = logging.getLogger(__name__)

# silencedetect prints e.g. "[silencedetect @ 0x..] silence_end: 10.8 | silence_duration: 0.8"
# Timestamps use %g formatting, so whole seconds come out without a fraction ("silence_start: 0")
SILENCE_END_RE = re.compile(r"silence_end: (\d+(?:\.\d+)?)")
SILENCE_START_RE = re.compile(r"silence_start: (\d+(?:\.\d+)?)")


def _match_timestamp(pattern: re.Pattern, line: str):
    match = pattern.search(line)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def parse_silence_events(content: str) -> SilenceEvents:
    """
    Collects silence boundaries from analyzer output.
    Line order is emission order and is preserved in both streams.
    Captures that fail to parse are skipped.
    """
    events = SilenceEvents()

    for line in content.splitlines():
        end = _match_timestamp(SILENCE_END_RE, line)
        if end is not None:
            events.add(SilenceEvent(end, SilenceEventKind.END))

        start = _match_timestamp(SILENCE_START_RE, line)
        if start is not None:
            events.add(SilenceEvent(start, SilenceEventKind.START))

    return events


def derive_segments(events: SilenceEvents) -> List[Segment]:
    """
    Pairs each silence end with the following silence start:
        segment[i] = (ends[i], starts[i + 1])

    The first start marks leading silence and never opens a segment.
    Returns an empty list when no pairing exists.
    """
    return [
        Segment(index=i, start=events.ends[i], end=events.starts[i + 1])
        for i in range(events.pair_count)
    ]


def parse_segments(content: str) -> List[Segment]:
    events = parse_silence_events(content)
    segments = derive_segments(events)
    logger.debug(
        f"Parsed {len(events.ends)} silence ends, {len(events.starts)} silence starts "
        f"-> {len(segments)} segments"
    )
    return segments
