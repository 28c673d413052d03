from pathlib import Path

import pytest

from convert_footage.domain.conversion import (
    ConversionOutcome,
    conversion_output_path,
    is_conversion_result,
)
from convert_footage.domain.exceptions import TranscoderFailure
from convert_footage.services.converter import FileConverter
from conftest import FakeTranscoder


def test_output_path_appends_suffix():
    assert conversion_output_path(Path("/v/clip.mp4")) == Path("/v/clip.mp4_conv.mov")
    assert conversion_output_path(Path("noext")) == Path("noext_conv.mov")


@pytest.mark.parametrize(
    "name, expected",
    [("video_conv.mov", True), ("clip.mp4_conv.mov", True), ("clip_conv.mp4", False), ("clip.mov", False)],
)
def test_is_conversion_result(name, expected):
    assert is_conversion_result(Path(name)) is expected


def test_converts_new_file(tmp_path, transcoder):
    source = tmp_path / "clip.mp4"
    source.write_bytes(b"data")

    outcome = FileConverter(transcoder).convert_file(source, 5)

    assert outcome is ConversionOutcome.CONVERTED
    assert transcoder.calls == [(source, tmp_path / "clip.mp4_conv.mov", 5)]


def test_skips_previous_result(tmp_path, transcoder, log_messages):
    source = tmp_path / "video_conv.mov"
    source.write_bytes(b"data")

    outcome = FileConverter(transcoder).convert_file(source, 1)

    assert outcome is ConversionOutcome.SKIPPED_ALREADY_RESULT
    assert transcoder.calls == []
    assert any("already a converted file" in message for message in log_messages)


def test_skips_when_output_exists(tmp_path, transcoder):
    source = tmp_path / "clip.mp4"
    source.write_bytes(b"new")
    (tmp_path / "clip.mp4_conv.mov").write_bytes(b"stale")

    outcome = FileConverter(transcoder).convert_file(source, 1)

    assert outcome is ConversionOutcome.SKIPPED_ALREADY_EXISTS
    assert transcoder.calls == []
    assert (tmp_path / "clip.mp4_conv.mov").read_bytes() == b"stale"


def test_dry_run_never_converts(tmp_path, transcoder):
    source = tmp_path / "clip.mp4"
    source.write_bytes(b"data")

    outcome = FileConverter(transcoder, dry_run=True).convert_file(source, 1)

    assert outcome is ConversionOutcome.PLANNED
    assert transcoder.calls == []
    assert not conversion_output_path(source).exists()


def test_transcoder_failure_propagates(tmp_path):
    source = tmp_path / "broken.mp4"
    source.write_bytes(b"data")
    transcoder = FakeTranscoder(fail_on={"broken.mp4"})

    with pytest.raises(TranscoderFailure, match="broken.mp4"):
        FileConverter(transcoder).convert_file(source, 1)
