"""
Value objects describing a conversion run.

Everything here is transient: a run builds its settings once from the command
line, and each file visited produces one `ConversionOutcome`. Nothing is stored
between runs apart from the converted files themselves.
"""
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from ..config.common import DEFAULT_LOG_LEVEL
from ..config.video import CONVERTED_SUFFIX, DEFAULT_QUALITY


@dataclass(frozen=True)
class ConversionSettings:
    """
    The validated request for one invocation of the tool.

    Attributes:
        target: The file or folder given on the command line.
        quality: FFmpeg `-q:v` value, already checked to be within bounds.
        dry_run: If True, files are listed but never converted.
        log_level: Console verbosity for the stdout sink.
    """

    target: Path
    quality: int = DEFAULT_QUALITY
    dry_run: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


class TargetKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


class ConversionOutcome(enum.Enum):
    """What happened to a single file."""

    SKIPPED_ALREADY_RESULT = "skipped_already_result"
    SKIPPED_ALREADY_EXISTS = "skipped_already_exists"
    PLANNED = "planned"
    CONVERTED = "converted"


@dataclass
class RunSummary:
    """Tally of outcomes over one run, used for the closing log line."""

    counts: Dict[ConversionOutcome, int] = field(
        default_factory=lambda: {outcome: 0 for outcome in ConversionOutcome}
    )

    def record(self, outcome: ConversionOutcome) -> None:
        self.counts[outcome] += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def skipped(self) -> int:
        return (
            self.counts[ConversionOutcome.SKIPPED_ALREADY_RESULT]
            + self.counts[ConversionOutcome.SKIPPED_ALREADY_EXISTS]
        )

    def describe(self) -> str:
        parts = [
            f"{self.counts[ConversionOutcome.CONVERTED]} converted",
            f"{self.skipped} skipped",
        ]
        if self.counts[ConversionOutcome.PLANNED]:
            parts.append(f"{self.counts[ConversionOutcome.PLANNED]} to convert (dry run)")
        return f"{self.total} file(s) visited: " + ", ".join(parts) + "."


def conversion_output_path(source: Path) -> Path:
    """
    Returns the path the converted copy of `source` is written to.

    The suffix is appended to the full file name rather than replacing the
    extension, so `clip.mp4` and `clip.mkv` never collide.
    """
    return source.with_name(source.name + CONVERTED_SUFFIX)


def is_conversion_result(path: Path) -> bool:
    """Tells whether `path` is named like a file this tool produced."""
    return path.name.endswith(CONVERTED_SUFFIX)
