"""Keeper-league round stacking, cap settlement and roster validation."""

from keepercap.settlement import compute_summary
from keepercap.stacking import assign_rounds
from keepercap.validation import validate_roster

__all__ = ["assign_rounds", "compute_summary", "validate_roster"]
