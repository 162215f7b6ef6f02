"""SMPTE-style start timecode parsing and normalization."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Minutes, seconds and frames take one or two digits. Drop-frame ';' is
# accepted but rendered as ':'.
TIMECODE_PATTERN = re.compile(r"^(\d+):(\d{1,2}):(\d{1,2})[:;](\d{1,2})$", re.ASCII)

# Fixed ceiling for minutes, seconds and frames. Not checked against the
# project frame rate, so 23.976fps timelines still accept frames up to 59.
FIELD_MAX = 59


@dataclass(frozen=True)
class Timecode:
    """A canonical HH:MM:SS:FF timecode.

    Attributes:
        hours: Unbounded hour count.
        minutes: 0-59.
        seconds: 0-59.
        frames: 0-59.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    frames: int = 0

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"

    @classmethod
    def parse(cls, value: str | None) -> "Timecode":
        """Like normalize_timecode() but drops the validity flag."""
        return normalize_timecode(value)[0]


DEFAULT_TIMECODE = Timecode()


def _to_int(group: str | None) -> int:
    try:
        return int(group)
    except (TypeError, ValueError):
        return 0


def normalize_timecode(value: str | None) -> tuple[Timecode, bool]:
    """Parse a free-form start timecode.

    Returns (timecode, was_valid). Anything that does not look like
    ``H+:M[M]:S[S][:;]F[F]`` yields (00:00:00:00, False). Matching input has its
    minutes, seconds and frames clamped to 59; hours are kept as given.
    """
    if value is None:
        return DEFAULT_TIMECODE, False
    trimmed = value.strip()
    if not trimmed:
        return DEFAULT_TIMECODE, False

    match = TIMECODE_PATTERN.match(trimmed)
    if match is None:
        return DEFAULT_TIMECODE, False

    hours, minutes, seconds, frames = (_to_int(g) for g in match.groups())
    timecode = Timecode(
        hours=hours,
        minutes=min(minutes, FIELD_MAX),
        seconds=min(seconds, FIELD_MAX),
        frames=min(frames, FIELD_MAX),
    )
    return timecode, True
