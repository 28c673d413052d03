"""
Configuration settings related to video conversion.

This module defines the quality bounds, the fixed codec selection passed to
FFmpeg, the naming scheme for converted files, and the text printed by the
`-h` and `-e` flags.
"""

# --- Quality Settings ---
# Passed straight through to FFmpeg's `-q:v`. Lower is better.
QUALITY_MIN = 1
QUALITY_MAX = 31
DEFAULT_QUALITY = 1

# --- Encoder Settings ---
VIDEO_CODEC = "mjpeg"
AUDIO_CODEC = "pcm_s16le"

# --- Output Naming ---
# Appended to the full source path, e.g. `clip.mp4` -> `clip.mp4_conv.mov`.
# Also used to recognise files this tool produced on a previous run.
CONVERTED_SUFFIX = "_conv.mov"

# --- Discovery ---
VIDEO_MIME_PREFIX = "video/"

# --- CLI Text ---
PROG_NAME = "convert-footage"

USAGE_TEXT = f"""\
Usage: {PROG_NAME} [-h] [-e] [-n] [-q N] [--log-level LEVEL] <file-or-folder>

Convert video footage into an editor-friendly MOV copy ({VIDEO_CODEC} video,
{AUDIO_CODEC} audio). Each output is written next to its source as
'<source>{CONVERTED_SUFFIX}'. Folders are searched recursively and only files
detected as video are converted. Sources that already have a converted copy
are skipped.

Options:
  -h, --help         Show this help and exit.
  -e, --examples     Show usage examples and exit.
  -q, --quality N    Video quality from {QUALITY_MIN} (best) to {QUALITY_MAX} (worst). Default: {DEFAULT_QUALITY}.
  -n, --dry-run      Only list the files that would be converted.
  --log-level LEVEL  Console verbosity: DEBUG, INFO, WARNING or ERROR. Default: INFO.
"""

EXAMPLES_TEXT = f"""\
Examples:
  Convert a single file at the best quality:
    {PROG_NAME} clip.mp4

  Convert every video below a folder, recursively:
    {PROG_NAME} ~/Videos/holiday

  Convert a folder at a lower quality to save disk space:
    {PROG_NAME} -q 5 ~/Videos/holiday

  See which files would be converted without converting them:
    {PROG_NAME} -n ~/Videos/holiday
"""
