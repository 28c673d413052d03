"""
Common configuration settings used throughout the application.

This module contains globally shared settings: the console log format and the
loading of user-specific configuration from an external YAML file, which lets a
user point the tool at a particular FFmpeg build without modifying the source.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger

# --- User-Defined Path Configuration ---
# `config.user.yaml` may define:
#
#   paths:
#     ffmpeg_dir: /opt/ffmpeg/bin
#
# It is looked up in the current directory first, then in the user config
# directory. When no file or key is found, executables are looked up on PATH.

USER_CONFIG_FILE_NAME = "config.user.yaml"
USER_CONFIG_DIR_NAME = "convert-footage"


@dataclass(frozen=True)
class UserConfig:
    """Settings read from `config.user.yaml`."""

    ffmpeg_dir: Optional[Path] = None


def user_config_dir() -> Path:
    """`$XDG_CONFIG_HOME/convert-footage`, or `~/.config/convert-footage`."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / USER_CONFIG_DIR_NAME


def user_config_candidates() -> List[Path]:
    return [
        Path.cwd() / USER_CONFIG_FILE_NAME,
        user_config_dir() / USER_CONFIG_FILE_NAME,
    ]


def find_user_config() -> Optional[Path]:
    """Returns the first existing `config.user.yaml`, or None."""
    for candidate in user_config_candidates():
        if candidate.is_file():
            return candidate
    return None


def load_user_config(config_path: Optional[Path] = None) -> UserConfig:
    """
    Loads the optional user configuration file.

    A missing file is normal and yields the defaults. A file that cannot be
    parsed is reported as a warning and also yields the defaults, so a broken
    config never stops a conversion run.

    Args:
        config_path: The YAML file to read. When omitted, the locations from
                     `user_config_candidates()` are searched.

    Returns:
        A `UserConfig` populated from the `paths` section of the file.
    """
    if config_path is None:
        config_path = find_user_config()
        if config_path is None:
            logger.debug(
                f"No {USER_CONFIG_FILE_NAME} found in {', '.join(map(str, user_config_candidates()))}. "
                "Relying on system PATH for executables."
            )
            return UserConfig()

    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Relying on system PATH for executables.")
        return UserConfig()

    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return UserConfig()

    if not isinstance(user_config, dict):
        return UserConfig()

    paths_config = user_config.get("paths") or {}
    ffmpeg_dir_str = paths_config.get("ffmpeg_dir") if isinstance(paths_config, dict) else None
    return UserConfig(ffmpeg_dir=Path(ffmpeg_dir_str) if ffmpeg_dir_str else None)


# --- Logging Configuration ---

# Loguru format for console output. Hints and errors are meant to be read by a
# person at the terminal, so the format stays short.
LOGGER_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"
