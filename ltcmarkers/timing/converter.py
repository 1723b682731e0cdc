"""
Timecode <-> frame count conversion.

Device and timeline timecodes are compared as absolute frame counts from
00:00:00:00. Frame arithmetic always uses the nominal (rounded) frame
rate: 23.976 counts as 24, 29.97 as 30. No drop-frame compensation is
applied, which matches how the recording device writes its timecodes.
"""

from __future__ import annotations

import math
import re

from timecode import Timecode

from ltcmarkers.utils.constants import DEFAULT_DURATION
from ltcmarkers.utils.exceptions import TimecodeFormatError

# HH:MM:SS:FF with any number of digits per group, surrounding whitespace allowed
TIMECODE_PATTERN = re.compile(r"^\s*(\d+):(\d+):(\d+):(\d+)\s*$")


def nominal_fps(fps: float) -> int:
    """
    Round a frame rate to its integer cadence.

    Args:
        fps: Frame rate as reported by the timeline (e.g. 23.976, 25, 29.97)

    Returns:
        Nearest integer frame rate, halves rounding up

    Examples:
        23.976 -> 24
        29.97 -> 30
        25.0 -> 25
    """
    return int(math.floor(float(fps) + 0.5))


def is_timecode(text: str | None) -> bool:
    """Check whether text looks like HH:MM:SS:FF (colon or semicolon)."""
    if text is None:
        return False
    return TIMECODE_PATTERN.match(str(text).replace(";", ":")) is not None


def tc_to_frames(text: str, fps: float) -> int:
    """
    Convert a timecode string to an absolute frame count.

    Semicolons are accepted as separators (drop-frame notation) but the
    count is computed exactly like a non-drop timecode.

    Args:
        text: Timecode as "HH:MM:SS:FF" or "HH:MM:SS;FF"
        fps: Timeline frame rate

    Returns:
        Frames since 00:00:00:00

    Raises:
        TimecodeFormatError: If text is not four numeric groups

    Example:
        tc_to_frames("01:00:00:00", 24) -> 86400
    """
    normalized = str(text).replace(";", ":")
    match = TIMECODE_PATTERN.match(normalized)
    if not match:
        raise TimecodeFormatError("Invalid timecode", normalized)

    hours, minutes, seconds, frames = (int(group) for group in match.groups())
    rate = nominal_fps(fps)
    return (hours * 3600 + minutes * 60 + seconds) * rate + frames


def frames_to_timecode(frames: int, fps: float) -> str:
    """
    Convert an absolute frame count back to "HH:MM:SS:FF".

    Uses the timecode module at the nominal rate so the result always
    reads as non-drop, mirroring tc_to_frames().

    Args:
        frames: Frames since 00:00:00:00 (must be >= 0)
        fps: Timeline frame rate

    Returns:
        Timecode string
    """
    if frames < 0:
        raise ValueError(f"Cannot express negative frame count {frames} as timecode")

    # Timecode counts frames from 1, so 00:00:00:00 is frames=1
    tc = Timecode(nominal_fps(fps), frames=frames + 1)
    return str(tc)


def parse_duration(text: str | None, fps: float) -> int:
    """
    Parse a Duration cell into a frame count of at least 1.

    Duration is cosmetic, so anything unusable becomes the default
    instead of raising.

    Args:
        text: Cell text; a plain number of frames or a timecode span
        fps: Timeline frame rate, used for timecode spans

    Returns:
        Duration in frames (>= 1)

    Examples:
        "" -> 1
        "48" -> 48
        "12.9" -> 12
        "00:00:02:00" at 24 fps -> 48
        "garbage" -> 1
    """
    raw = (text or "").strip()
    if not raw:
        return DEFAULT_DURATION

    if ":" in raw or ";" in raw:
        try:
            return max(DEFAULT_DURATION, tc_to_frames(raw, fps))
        except TimecodeFormatError:
            return DEFAULT_DURATION

    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_DURATION

    if math.isnan(value) or math.isinf(value):
        return DEFAULT_DURATION

    return max(DEFAULT_DURATION, math.floor(value))
