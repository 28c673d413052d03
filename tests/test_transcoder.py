from pathlib import Path

import ffmpeg
import pytest

from convert_footage.domain.exceptions import TranscoderFailure
from convert_footage.services.transcoder import FfmpegTranscoder


def test_build_command():
    cmd = FfmpegTranscoder("/opt/ffmpeg/bin/ffmpeg").build_command(
        Path("clip.mp4"), Path("clip.mp4_conv.mov"), 5
    )

    assert cmd[0] == "/opt/ffmpeg/bin/ffmpeg"
    assert cmd[cmd.index("-i") + 1] == "clip.mp4"
    assert cmd[cmd.index("-vcodec") + 1] == "mjpeg"
    assert cmd[cmd.index("-acodec") + 1] == "pcm_s16le"
    assert cmd[cmd.index("-q:v") + 1] == "5"
    assert "clip.mp4_conv.mov" in cmd
    assert "-n" in cmd
    assert "-y" not in cmd


def test_convert_runs_ffmpeg_once(monkeypatch):
    calls = []
    monkeypatch.setattr(ffmpeg, "run", lambda stream, cmd: calls.append((stream, cmd)))

    FfmpegTranscoder("ffmpeg").convert(Path("clip.mp4"), Path("clip.mp4_conv.mov"), 3)

    assert len(calls) == 1
    assert calls[0][1] == "ffmpeg"
    args = ffmpeg.get_args(calls[0][0])
    assert args[args.index("-q:v") + 1] == "3"


def test_nonzero_exit_becomes_transcoder_failure(monkeypatch):
    def fail(stream, cmd):
        raise ffmpeg.Error("ffmpeg", None, None)

    monkeypatch.setattr(ffmpeg, "run", fail)

    with pytest.raises(TranscoderFailure, match="clip.mp4") as excinfo:
        FfmpegTranscoder().convert(Path("clip.mp4"), Path("clip.mp4_conv.mov"), 1)
    assert isinstance(excinfo.value.__cause__, ffmpeg.Error)


def test_missing_executable_becomes_transcoder_failure(monkeypatch):
    def missing(stream, cmd):
        raise FileNotFoundError(cmd)

    monkeypatch.setattr(ffmpeg, "run", missing)

    with pytest.raises(TranscoderFailure, match="was not found"):
        FfmpegTranscoder("no-such-ffmpeg").convert(Path("a.mp4"), Path("a.mp4_conv.mov"), 1)


def test_unexecutable_ffmpeg_becomes_transcoder_failure(monkeypatch):
    def denied(stream, cmd):
        raise PermissionError(13, "Permission denied", cmd)

    monkeypatch.setattr(ffmpeg, "run", denied)

    with pytest.raises(TranscoderFailure, match="could not be started: Permission denied") as excinfo:
        FfmpegTranscoder("/opt/ffmpeg/bin/ffmpeg").convert(Path("a.mp4"), Path("a.mp4_conv.mov"), 1)
    assert isinstance(excinfo.value.__cause__, PermissionError)
