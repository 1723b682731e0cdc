"""Shared helpers for the ltcmarkers package."""
