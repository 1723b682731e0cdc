"""Timecode arithmetic for marker import."""

from .converter import (
    TIMECODE_PATTERN,
    nominal_fps,
    is_timecode,
    tc_to_frames,
    frames_to_timecode,
    parse_duration,
)

__all__ = [
    'TIMECODE_PATTERN',
    'nominal_fps',
    'is_timecode',
    'tc_to_frames',
    'frames_to_timecode',
    'parse_duration',
]
