"""
convert-footage: make editor-friendly copies of video footage.

The package is laid out in layers:
    __main__.py  Entry point: logging setup and exit statuses.
    cli.py    Turns the command line into a `ConversionSettings`.
    config/   Constants and the optional `config.user.yaml`.
    domain/   Value objects and exceptions.
    services/ File discovery, type detection, the per-file decision and FFmpeg.
    pipeline/ Ties the services together for one run.
    utils/    Locating FFmpeg and formatting commands for the log.
"""

__version__ = "1.0.0"
