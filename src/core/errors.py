"""barotool exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Core code raises these; only the CLI turns them into exit codes.
"""

from __future__ import annotations


class BaroError(Exception):
    """Base exception for all barotool failures."""


class BaroConfigError(BaroError):
    """Raised for invalid runtime configuration."""


class BaroIOError(BaroError):
    """Raised when a sample file cannot be opened, read, written, or synced."""


class BaroFormatError(BaroError):
    """Raised for malformed sample bytes or values the format cannot hold."""


class BaroUsageError(BaroError):
    """Raised for invalid caller arguments before any file access."""


class BaroNotFoundError(BaroError):
    """Raised when an edit key matches no eligible sample."""
