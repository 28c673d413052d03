"""
The per-file conversion decision.

`FileConverter` looks at one path and decides whether it needs converting. Files
that are themselves conversion results, and files whose converted copy already
exists, are skipped. Everything else is handed to the transcoder. Transcoder
failures are not caught here: they stop the whole run.
"""
from pathlib import Path

from loguru import logger

from ..domain.conversion import (
    ConversionOutcome,
    conversion_output_path,
    is_conversion_result,
)
from .transcoder import Transcoder


class FileConverter:
    def __init__(self, transcoder: Transcoder, dry_run: bool = False):
        self.transcoder = transcoder
        self.dry_run = dry_run

    def convert_file(self, source: Path, quality: int) -> ConversionOutcome:
        """
        Converts `source` unless it is a previous result or already converted.

        Only the existence of `<source>_conv.mov` is checked. A converted copy
        older than its source is still considered up to date.

        Raises:
            TranscoderFailure: Propagated unchanged from the transcoder.
        """
        output = conversion_output_path(source)

        if is_conversion_result(source):
            logger.info(f"Skipping '{source}': it is already a converted file.")
            return ConversionOutcome.SKIPPED_ALREADY_RESULT

        # TODO: compare modification times so a re-edited source gets converted again.
        if output.exists():
            logger.info(f"Skipping '{source}': '{output.name}' already exists.")
            return ConversionOutcome.SKIPPED_ALREADY_EXISTS

        if self.dry_run:
            logger.info(f"Would convert '{source}' to '{output.name}' (quality {quality}).")
            return ConversionOutcome.PLANNED

        logger.info(f"Converting '{source}' to '{output.name}' (quality {quality})...")
        self.transcoder.convert(source, output, quality)
        logger.success(f"Converted '{source}'.")
        return ConversionOutcome.CONVERTED
