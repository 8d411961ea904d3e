"""Configuration helpers for league cap and fee rules."""

from .league import LeagueCapRules, default_rules, get_rules, iter_rules

__all__ = [
    "LeagueCapRules",
    "default_rules",
    "get_rules",
    "iter_rules",
]
