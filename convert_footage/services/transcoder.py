"""
This module defines the transcoder service, the bridge between the conversion
logic and FFmpeg.

`Transcoder` is the capability the rest of the application depends on: convert
one input file into one output file at a given quality, or raise. The concrete
`FfmpegTranscoder` builds the FFmpeg command with the `ffmpeg-python` bindings
and runs it in the foreground, so FFmpeg's own progress output reaches the
terminal unchanged.
"""
from pathlib import Path
from typing import List

import ffmpeg
from loguru import logger

from ..config.video import AUDIO_CODEC, VIDEO_CODEC
from ..domain.exceptions import TranscoderFailure
from ..utils.ffmpeg_utils import display_command


class Transcoder:
    """Converts a single media file. Subclasses provide the actual tool."""

    def convert(self, source: Path, output: Path, quality: int) -> None:
        """
        Writes a converted copy of `source` to `output`.

        Raises:
            TranscoderFailure: If the conversion did not complete successfully.
        """
        raise NotImplementedError("Subclasses must implement convert().")


class FfmpegTranscoder(Transcoder):
    """
    Runs FFmpeg with a fixed codec selection.

    The video stream is re-encoded with `VIDEO_CODEC` at `-q:v <quality>` and the
    audio with the uncompressed `AUDIO_CODEC`, into a MOV container picked from
    the output file name. FFmpeg is told never to overwrite an existing output.
    """

    def __init__(self, ffmpeg_cmd: str = "ffmpeg"):
        self.ffmpeg_cmd = ffmpeg_cmd

    def build_stream(self, source: Path, output: Path, quality: int):
        return (
            ffmpeg.input(str(source))
            .output(
                str(output),
                vcodec=VIDEO_CODEC,
                acodec=AUDIO_CODEC,
                **{"q:v": quality},
            )
            .global_args("-hide_banner", "-n")
        )

    def build_command(self, source: Path, output: Path, quality: int) -> List[str]:
        return ffmpeg.compile(self.build_stream(source, output, quality), cmd=self.ffmpeg_cmd)

    def convert(self, source: Path, output: Path, quality: int) -> None:
        stream = self.build_stream(source, output, quality)
        logger.debug(f"Running: {display_command(self.build_command(source, output, quality))}")
        try:
            ffmpeg.run(stream, cmd=self.ffmpeg_cmd)
        except ffmpeg.Error as e:
            raise TranscoderFailure(source, str(e)) from e
        except FileNotFoundError as e:
            raise TranscoderFailure(
                source, f"FFmpeg executable '{self.ffmpeg_cmd}' was not found"
            ) from e
        except OSError as e:
            raise TranscoderFailure(
                source, f"FFmpeg executable '{self.ffmpeg_cmd}' could not be started: {e.strerror}"
            ) from e
