"""
File type detection.

The `Classifier` capability maps a path to a MIME type string. The production
implementation asks libmagic (through `python-magic`) to sniff the file content,
so a video is recognised even when its extension is missing or misleading.
"""
from pathlib import Path

import magic
from loguru import logger

from ..config.video import VIDEO_MIME_PREFIX
from ..domain.exceptions import ClassifierFailure


class Classifier:
    def classify(self, path: Path) -> str:
        """Returns the MIME type of `path`, e.g. 'video/mp4'."""
        raise NotImplementedError("Subclasses must implement classify().")


class MagicClassifier(Classifier):
    def classify(self, path: Path) -> str:
        try:
            mime = magic.from_file(str(path), mime=True)
        except (magic.MagicException, OSError) as e:
            raise ClassifierFailure(path, str(e)) from e
        logger.trace(f"{path}: {mime}")
        return mime


def is_video_mime(mime: str) -> bool:
    return mime.startswith(VIDEO_MIME_PREFIX)
