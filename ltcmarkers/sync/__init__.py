"""Sync point detection and frame offset calculation."""

from .resolver import (
    SyncResolver,
    SyncResult,
    normalize_marker_text,
    is_session_start,
    find_session_start,
)

__all__ = [
    'SyncResolver',
    'SyncResult',
    'normalize_marker_text',
    'is_session_start',
    'find_session_start',
]
