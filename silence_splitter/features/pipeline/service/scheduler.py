import queue
import logging
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional

from silence_splitter.core.common.enums import OutcomeStatus, ProcessingStage
from silence_splitter.core.exceptions import DiscoveryError
from silence_splitter.core.jobs.service.manager import JobLedger
from silence_splitter.features.file_processing.domain.models import Outcome
from silence_splitter.features.file_processing.service.processor import FileProcessor
from silence_splitter.features.source_scanner.domain.models import ScanRequest, ScanSummary
from silence_splitter.features.source_scanner.service.scanner import DirectoryScanner

from ..domain.models import PipelineConfig, PipelineReport

logger = logging.getLogger(__name__)

# Marks the end of a queue. One per worker on the job queue, one on the result queue.
_CLOSED = object()


class PipelineScheduler:
    """
    Scanners -> bounded job queue -> worker pool -> bounded result queue -> aggregator.

    One scanner thread per root, a fixed pool of worker threads. The job queue
    is closed only after every scanner has been joined; results are drained on
    the calling thread until every worker has exited, so exactly one outcome is
    collected per enqueued file.
    """

    def __init__(self,
                 processor: FileProcessor,
                 config: Optional[PipelineConfig] = None,
                 scanner: Optional[DirectoryScanner] = None,
                 ledger: Optional[JobLedger] = None,
                 on_outcome: Optional[Callable[[Outcome], None]] = None):
        self.processor = processor
        self.config = config or PipelineConfig()
        self.scanner = scanner or DirectoryScanner()
        self.ledger = ledger
        self.on_outcome = on_outcome

        self._enqueued = 0
        self._enqueued_lock = threading.Lock()

    def run(self, roots: List[Path]) -> PipelineReport:
        roots = [Path(r) for r in roots]
        jobs: queue.Queue = queue.Queue(maxsize=self.config.job_queue_capacity)
        results: queue.Queue = queue.Queue(maxsize=self.config.result_queue_capacity)
        scans: Dict[int, ScanSummary] = {}
        self._enqueued = 0

        logger.info(
            f"Starting pipeline: {len(roots)} roots, {self.config.worker_count} workers, "
            f"queue capacity {self.config.job_queue_capacity}"
        )

        # 1. Workers first, so scanners never wait on an undrained queue
        workers = [
            threading.Thread(target=self._work, args=(w, jobs, results),
                             name=f"splitter-worker-{w}", daemon=True)
            for w in range(1, self.config.worker_count + 1)
        ]
        for t in workers:
            t.start()

        # 2. One scanner per root
        scanners = [
            threading.Thread(target=self._scan_root, args=(i, root, jobs, scans),
                             name=f"splitter-scanner-{i}", daemon=True)
            for i, root in enumerate(roots)
        ]
        for t in scanners:
            t.start()

        # 3. Barrier: all scanners done -> close jobs -> all workers done -> close results
        closer = threading.Thread(target=self._close_when_done, args=(scanners, workers, jobs, results),
                                  name="splitter-closer", daemon=True)
        closer.start()

        # 4. Aggregate on the calling thread
        report = PipelineReport()
        while True:
            item = results.get()
            if item is _CLOSED:
                break
            self._collect(item, report)

        closer.join()
        report.scans = [scans[i] for i in range(len(roots))]
        report.files_enqueued = self._enqueued

        if len(report.outcomes) != report.files_enqueued:
            logger.error(
                f"Collected {len(report.outcomes)} outcomes for {report.files_enqueued} enqueued files"
            )

        logger.info(
            f"Pipeline complete. {report.succeeded} succeeded, {report.no_silence} without silence, "
            f"{report.failed} failed, {len(report.discovery_errors)} discovery errors"
        )
        return report

    def _scan_root(self, idx: int, root: Path, jobs: queue.Queue, scans: Dict[int, ScanSummary]):
        def enqueue(path: Path):
            # Blocks while the queue is full (backpressure)
            jobs.put(path)
            with self._enqueued_lock:
                self._enqueued += 1

        request = ScanRequest(root_path=root, extensions=self.config.extensions)
        try:
            scans[idx] = self.scanner.scan(request, enqueue)
        except Exception as e:
            logger.exception(f"Scan of {root} aborted: {e}")
            scans[idx] = ScanSummary(root_path=root, errors=[DiscoveryError(root, e)])

    def _work(self, worker_id: int, jobs: queue.Queue, results: queue.Queue):
        while True:
            path = jobs.get()
            if path is _CLOSED:
                break

            logger.info(f"Worker {worker_id} processing file: {path}")
            try:
                outcome = self.processor.process(path)
            except Exception as e:
                # Every job yields exactly one outcome
                logger.exception(f"Worker {worker_id} crashed on {path}: {e}")
                outcome = Outcome(path, OutcomeStatus.FAILED, ProcessingStage.FAILED, error=e)

            results.put(outcome)

    def _close_when_done(self, scanners: List[threading.Thread], workers: List[threading.Thread],
                         jobs: queue.Queue, results: queue.Queue):
        for t in scanners:
            t.join()
        for _ in workers:
            jobs.put(_CLOSED)

        for t in workers:
            t.join()
        results.put(_CLOSED)

    def _collect(self, outcome: Outcome, report: PipelineReport):
        report.outcomes.append(outcome)

        if outcome.status == OutcomeStatus.FAILED:
            logger.error(f"Error: {outcome.message}")

        if self.ledger is not None:
            try:
                self.ledger.record(outcome)
            except Exception as e:
                # Ledger failures never stop the drain
                logger.error(f"Failed to record outcome for {outcome.path}: {e}")

        if self.on_outcome is not None:
            try:
                self.on_outcome(outcome)
            except Exception as e:
                logger.error(f"Outcome callback failed for {outcome.path}: {e}")
