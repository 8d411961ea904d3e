"""Roster validation findings."""

from .roster import has_blocking_errors, validate_roster

__all__ = ["has_blocking_errors", "validate_roster"]
