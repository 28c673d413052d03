import sys
from collections.abc import Generator
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import pytest
from loguru import logger

from convert_footage.domain.exceptions import TranscoderFailure
from convert_footage.services.classifier import Classifier
from convert_footage.services.transcoder import Transcoder

VIDEO_SUFFIXES = {".mp4": "video/mp4", ".mkv": "video/x-matroska", ".mov": "video/quicktime"}


class FakeClassifier(Classifier):
    """Classifies by file extension and records every path it was asked about."""

    def __init__(self):
        self.seen: List[Path] = []

    def classify(self, path: Path) -> str:
        self.seen.append(path)
        return VIDEO_SUFFIXES.get(path.suffix, "text/plain")


class FakeTranscoder(Transcoder):
    """Records calls and writes an empty output file, unless told to fail."""

    def __init__(self, fail_on: Optional[Set[str]] = None):
        self.calls: List[Tuple[Path, Path, int]] = []
        self.fail_on = fail_on or set()

    def convert(self, source: Path, output: Path, quality: int) -> None:
        self.calls.append((source, output, quality))
        if source.name in self.fail_on:
            raise TranscoderFailure(source, "ffmpeg error (see stderr output for detail)")
        output.write_bytes(b"")


@pytest.fixture(autouse=True)
def restore_std_streams() -> Generator[None, None, None]:
    original_stdout = sys.stdout
    original_stderr = sys.stderr
    try:
        yield
    finally:
        sys.stdout = original_stdout
        sys.stderr = original_stderr


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None, None, None]:
    yield
    logger.remove()


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture
def transcoder() -> FakeTranscoder:
    return FakeTranscoder()


@pytest.fixture
def media_tree(tmp_path: Path) -> Dict[str, Path]:
    """A folder with two videos at different depths and two other files."""
    files = {
        "clip": tmp_path / "clip.mp4",
        "deep": tmp_path / "day1" / "camera" / "deep.mkv",
        "notes": tmp_path / "notes.txt",
        "thumb": tmp_path / "day1" / "thumb.jpg",
    }
    for path in files.values():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"data")
    files["root"] = tmp_path
    return files
