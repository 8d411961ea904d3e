"""Keeper round assignment and base-round derivation."""

from .service import (
    StackingResult,
    assign_rounds,
    base_keeper_round,
    derive_base_rounds,
    move_priority,
)

__all__ = [
    "StackingResult",
    "assign_rounds",
    "base_keeper_round",
    "derive_base_rounds",
    "move_priority",
]
