# File: silence_splitter/cli.py

import sys
import logging
import argparse

from sqlalchemy.exc import SQLAlchemyError

from silence_splitter.core.config.settings import settings
from silence_splitter.core.exceptions import ToolNotFoundError
from silence_splitter.core.tools.locator import resolve_toolchain
from silence_splitter.features.pipeline.domain.models import PipelineConfig
from silence_splitter.features.pipeline.service.api import run_pipeline

logger = logging.getLogger("silence_splitter")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="silence-splitter",
        description="Split every mp3 under the given directories at its silences."
    )
    parser.add_argument(
        'directories', nargs='+', metavar='DIRECTORY',
        help="Root directories to scan recursively."
    )
    parser.add_argument(
        '-w', '--workers', dest='workers', type=int, default=settings.WORKER_COUNT,
        help="Number of files processed in parallel (default: CPU count)."
    )
    parser.add_argument(
        '--ledger', dest='ledger_url', default=settings.LEDGER_DATABASE_URL,
        help="Database URL where every outcome is recorded, e.g. sqlite:///runs.db"
    )
    parser.add_argument(
        '--ffmpeg', dest='ffmpeg', default=None,
        help="Path to the ffmpeg binary (default: ./ffmpeg, then PATH)."
    )
    parser.add_argument(
        '-v', '--verbose', dest='verbose', action='store_true',
        help="Enable debug logging, including every ffmpeg command."
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s"
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if settings.INVALID_ENV:
        for message in settings.INVALID_ENV:
            logger.error(f"Error: {message}")
        return 2

    try:
        tools = resolve_toolchain(explicit_binary=args.ffmpeg)
    except ToolNotFoundError as e:
        logger.error(f"Error: {e}")
        return 1

    try:
        config = PipelineConfig(worker_count=args.workers)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    try:
        report = run_pipeline(args.directories, tools, config=config, ledger_url=args.ledger_url)
    except SQLAlchemyError as e:
        logger.error(f"Error: could not open ledger {args.ledger_url}: {e}")
        return 1

    logger.info(
        f"Done: {report.files_enqueued} files, {report.succeeded} split, "
        f"{report.no_silence} without silence, {report.failed} failed, "
        f"{len(report.discovery_errors)} unreadable paths"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
