import logging
from pathlib import Path

from silence_splitter.core.common.enums import OutcomeStatus, ProcessingStage
from silence_splitter.core.exceptions import ProbeError, ExportError, NoSilenceDetected
from silence_splitter.features.silence_detection.domain.interfaces import ISilenceProbe
from silence_splitter.features.silence_detection.data.silence_parser import parse_segments
from silence_splitter.features.segment_export.domain.interfaces import ISegmentExporter

from ..domain.models import Outcome

logger = logging.getLogger(__name__)

class FileProcessor:
    """
    Runs probe -> parse -> export for a single file.

    PROBING -> PARSING -> (NO_SILENCE | EXPORTING) -> DONE | FAILED

    Every file-level error ends up in the returned Outcome; nothing is raised
    to the caller, so one bad file never affects the others.
    """

    def __init__(self, probe: ISilenceProbe, exporter: ISegmentExporter):
        self.probe = probe
        self.exporter = exporter

    def process(self, path: Path) -> Outcome:
        logger.info(f"Processing file: {path}")

        # 1. Probing
        try:
            output = self.probe.probe(path)
        except ProbeError as e:
            logger.error(f"[{ProcessingStage.PROBING.value}] {e}")
            return Outcome(path, OutcomeStatus.FAILED, ProcessingStage.PROBING, error=e)

        # 2. Parsing
        logger.debug(f"[{ProcessingStage.PARSING.value}] {path}")
        segments = parse_segments(output)
        if not segments:
            error = NoSilenceDetected(path)
            logger.info(str(error))
            return Outcome(path, OutcomeStatus.NO_SILENCE, ProcessingStage.NO_SILENCE, error=error)

        # 3. Exporting
        logger.info(f"[{ProcessingStage.EXPORTING.value}] {len(segments)} segments from {path}")
        try:
            result = self.exporter.export_segments(path, segments)
        except ExportError as e:
            logger.error(f"[{ProcessingStage.EXPORTING.value}] {e}")
            return Outcome(path, OutcomeStatus.FAILED, ProcessingStage.EXPORTING, error=e)

        logger.info(f"Successfully processed file: {path}")
        return Outcome(
            path,
            OutcomeStatus.COMPLETED,
            ProcessingStage.DONE,
            segment_count=result.segment_count,
            output_paths=list(result.output_paths)
        )
