"""
Main entry point for convert-footage.

This script configures console logging, parses the command line, and runs the
conversion pipeline on the requested file or folder. It is also the place where
every failure is turned into an exit status: 0 for success (including runs with
nothing to do), 1 for anything that went wrong.
"""

import sys
from typing import List, Optional

from loguru import logger

from .cli import ACTION_EXAMPLES, ACTION_HELP, parse_args
from .config.common import DEFAULT_LOG_LEVEL, LOGGER_FORMAT, load_user_config
from .config.video import EXAMPLES_TEXT, USAGE_TEXT
from .domain.exceptions import CollaboratorFailure, NotFoundError, UsageError
from .pipeline.conversion_pipeline import ConversionPipeline
from .services.classifier import MagicClassifier
from .services.file_processing_service import resolve_target
from .services.transcoder import FfmpegTranscoder
from .utils.module_updater import Modules


def configure_logger(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Sends hints and progress to stdout and errors to stderr, both coloured.

    `level` only filters the stdout sink. Errors are always shown.
    """
    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        format=LOGGER_FORMAT,
        filter=lambda record: record["level"].no < logger.level("ERROR").no,
    )
    logger.add(sys.stderr, level="ERROR", format=LOGGER_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs convert-footage and returns the process exit status.

    Steps:
    1. Parses the arguments; `-h` and `-e` print their text and stop here.
    2. Checks that the target exists and whether it is a file or a folder.
    3. Locates FFmpeg, using `config.user.yaml` when present.
    4. Runs the pipeline. The first external tool failure ends the run.
    """
    configure_logger()

    try:
        request = parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError as e:
        logger.error(str(e))
        print(USAGE_TEXT)
        return 1

    if request.action == ACTION_HELP:
        print(USAGE_TEXT)
        return 0
    if request.action == ACTION_EXAMPLES:
        print(EXAMPLES_TEXT)
        return 0

    settings = request.settings
    configure_logger(settings.log_level)
    logger.debug(f"Parsed settings: {settings}")

    try:
        kind = resolve_target(settings.target)
    except NotFoundError as e:
        logger.error(str(e))
        return 1

    ffmpeg_cmd = Modules.resolve_ffmpeg(load_user_config())
    if not settings.dry_run:
        Modules.verify_ffmpeg(ffmpeg_cmd)

    pipeline = ConversionPipeline(
        settings,
        classifier=MagicClassifier(),
        transcoder=FfmpegTranscoder(ffmpeg_cmd),
    )

    try:
        pipeline.run(kind)
    except CollaboratorFailure as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"Could not read '{e.filename}': {e.strerror}")
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
