"""Persist and load per-league rule overrides."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Union

from keepercap.config import LeagueCapRules, get_rules


_OVERRIDABLE = {f.name for f in fields(LeagueCapRules)} - {"key"}


@dataclass
class LeagueProfile:
    rules: str = "STANDARD"
    overrides: Dict[str, Union[int, float]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "LeagueProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            rules=data.get("rules", "STANDARD"),
            overrides=data.get("overrides", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "rules": self.rules,
            "overrides": self.overrides,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def resolve(self) -> LeagueCapRules:
        unknown = sorted(set(self.overrides) - _OVERRIDABLE)
        if unknown:
            raise ValueError(f"Unknown league rule overrides: {', '.join(unknown)}")
        return replace(get_rules(self.rules), **self.overrides)
