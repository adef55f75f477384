# Rev 0.1.0
# stafftrack – error types
from __future__ import annotations


class TrackerError(Exception):
    """Base for every error the core raises on a rejected operation."""


class ValidationError(TrackerError, ValueError):
    """Input rejected before any state was touched."""


class NotFoundError(TrackerError, LookupError):
    """Identifier or position does not match a stored record."""
