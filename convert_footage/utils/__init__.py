"""
Utilities Package for convert-footage.

Modules:
    - ffmpeg_utils.py: Formats command lines for logging.
    - module_updater.py: Locates and verifies the FFmpeg executable.
"""
