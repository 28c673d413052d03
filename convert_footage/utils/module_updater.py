"""
This module provides the Modules class to locate and verify the external
tools required by the application, namely FFmpeg.
"""
import subprocess
import sys
from typing import Optional

from loguru import logger

from ..config.common import UserConfig


class Modules:
    """
    A utility class to handle operations related to external modules like FFmpeg.

    It reads the FFmpeg directory from the user's `config.user.yaml` file and
    falls back to the system's PATH if no specific path is configured.
    """

    @staticmethod
    def resolve_ffmpeg(user_config: Optional[UserConfig] = None) -> str:
        """
        Determines the FFmpeg executable to use.

        The configured `ffmpeg_dir` takes priority. If it is not set, or the
        executable is not inside it, plain 'ffmpeg' is returned so the system
        PATH is searched.

        Returns:
            The command name or absolute path of the FFmpeg executable.
        """
        ffmpeg_exe_name = "ffmpeg.exe" if sys.platform == "win32" else "ffmpeg"

        ffmpeg_dir = user_config.ffmpeg_dir if user_config else None
        if ffmpeg_dir and ffmpeg_dir.is_dir():
            configured_ffmpeg_path = ffmpeg_dir / ffmpeg_exe_name
            if configured_ffmpeg_path.is_file():
                logger.debug(f"Using FFmpeg from configured path: '{configured_ffmpeg_path}'")
                return str(configured_ffmpeg_path)
            logger.warning(
                f"`ffmpeg_dir` is configured, but '{ffmpeg_exe_name}' was not found there. Falling back to system PATH."
            )
        elif ffmpeg_dir:
            logger.warning(f"Configured `ffmpeg_dir` '{ffmpeg_dir}' is not a directory. Falling back to system PATH.")

        return "ffmpeg"

    @staticmethod
    def verify_ffmpeg(ffmpeg_cmd: str) -> bool:
        """
        Checks that FFmpeg can be executed by running `ffmpeg -version`.

        Only logs the result. A missing FFmpeg surfaces again, as a conversion
        failure, the first time a file actually needs converting.

        Returns:
            True if the version command succeeded.
        """
        try:
            result = subprocess.run(
                [ffmpeg_cmd, "-version"],
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except subprocess.CalledProcessError as e:
            logger.warning(f"FFmpeg version command failed (return code {e.returncode}):\n{e.stderr}")
            return False
        except FileNotFoundError:
            logger.warning(
                "FFmpeg command not found. Please ensure FFmpeg is installed and accessible.\n"
                "You can either add it to your system's PATH or specify its location in the 'config.user.yaml' file."
            )
            return False

        version_output_lines = result.stdout.splitlines()
        if version_output_lines:
            logger.debug(f"FFmpeg version check successful: {version_output_lines[0]}")
        return True
