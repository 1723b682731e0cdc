"""Editing application adapters."""

from .base import TimelineHost
from .memory_host import MemoryTimelineHost, StoredMarker
from .resolve_host import ResolveHost

__all__ = ['TimelineHost', 'MemoryTimelineHost', 'StoredMarker', 'ResolveHost']
