"""
Configuration Package for convert-footage.

This package centralizes the static configuration settings for the application.
Keeping these values apart from the conversion logic makes it possible to adjust
codecs, quality bounds or the help text without touching the code that uses them.

This package includes settings for:
- Logging format and user-overridable paths for FFmpeg (`common.py`).
- Quality bounds, codec selection, output naming and the CLI help text (`video.py`).
"""
