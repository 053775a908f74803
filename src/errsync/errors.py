"""Exceptions raised by the sync pipeline. The CLI catches SyncError once."""

from __future__ import annotations


class SyncError(Exception):
    """Base class for every failure that aborts a sync run."""


class ConfigError(SyncError):
    """Raised for an unreadable or invalid errsync.toml."""


class SourceError(SyncError):
    """Raised when ERRORS.md cannot be fetched or read."""


class EnrichmentError(SyncError):
    """Raised when the enrichment file exists but cannot be used."""


class WriteError(SyncError):
    """Raised when errors.json cannot be written."""
