from pathlib import Path
from typing import Optional

from loguru import logger

from ..domain.conversion import (
    ConversionOutcome,
    ConversionSettings,
    RunSummary,
    TargetKind,
)
from ..services.classifier import Classifier
from ..services.converter import FileConverter
from ..services.file_processing_service import discover_video_files, resolve_target
from ..services.transcoder import Transcoder

NOTHING_TO_CONVERT = "Couldn't find any files to convert."


class ConversionPipeline:
    """
    Runs one conversion request from start to finish.

    Files are processed strictly one after the other. The first failure of the
    walk, the classifier or the transcoder ends the run, leaving files converted
    so far in place.
    """

    def __init__(
        self,
        settings: ConversionSettings,
        classifier: Classifier,
        transcoder: Transcoder,
    ):
        self.settings = settings
        self.classifier = classifier
        self.converter = FileConverter(transcoder, dry_run=settings.dry_run)
        self.summary = RunSummary()

    def run(self, kind: Optional[TargetKind] = None) -> RunSummary:
        self.summary = RunSummary()
        target = self.settings.target
        if kind is None:
            kind = resolve_target(target)

        if kind is TargetKind.DIRECTORY:
            logger.debug(f"Scanning folder '{target}' for video files.")
            self.process_folder(target)
        else:
            self.process_file(target)

        if self.summary.total:
            logger.success(self.summary.describe())
        return self.summary

    def process_file(self, path: Path) -> ConversionOutcome:
        outcome = self.converter.convert_file(path, self.settings.quality)
        self.summary.record(outcome)
        return outcome

    def process_folder(self, root: Path) -> None:
        found_any = False
        for path in discover_video_files(root, self.classifier):
            found_any = True
            self.process_file(path)

        if not found_any:
            logger.info(NOTHING_TO_CONVERT)
