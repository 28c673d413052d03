"""
Provides the discovery of video files below a folder.

Discovery is a lazy walk: files are classified and handed on one at a time, so
the first conversion starts before the whole tree has been scanned. Errors
raised while walking are not skipped, they abort the run like any other
failure of the file system.
"""
import os
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..domain.conversion import TargetKind
from ..domain.exceptions import NotFoundError
from .classifier import Classifier, is_video_mime


def _raise_walk_error(error: OSError) -> None:
    raise error


def walk_files(root: Path) -> Iterator[Path]:
    """
    Yields every regular file below `root`, at any depth, in walk order.

    Raises:
        OSError: If a directory in the tree cannot be listed.
    """
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        current = Path(dirpath)
        for name in filenames:
            path = current / name
            if path.is_file():
                yield path


def discover_video_files(root: Path, classifier: Classifier) -> Iterator[Path]:
    """
    Yields the files below `root` whose detected MIME type is `video/*`.

    Raises:
        OSError: From the directory walk.
        ClassifierFailure: If a file's type cannot be detected.
    """
    for path in walk_files(root):
        mime = classifier.classify(path)
        if is_video_mime(mime):
            logger.debug(f"Found video '{path}' ({mime}).")
            yield path
        else:
            logger.debug(f"Ignoring '{path}' ({mime}).")


def resolve_target(target: Path) -> TargetKind:
    """
    Classifies the path given on the command line.

    Raises:
        NotFoundError: If `target` is neither a directory nor a regular file.
    """
    if target.is_dir():
        return TargetKind.DIRECTORY
    if target.is_file():
        return TargetKind.FILE
    raise NotFoundError(target)
