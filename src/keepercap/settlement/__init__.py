"""Cap and fee settlement for keeper rosters."""

from .summary import compute_summary, effective_cap, over_by_millions
from .trade import TeamCapImpact, TradeAsset, compute_trade_cap_impact

__all__ = [
    "TeamCapImpact",
    "TradeAsset",
    "compute_summary",
    "compute_trade_cap_impact",
    "effective_cap",
    "over_by_millions",
]
