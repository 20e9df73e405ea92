"""Persist and load CLI balancer profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from pysquads.config import BalancerConfig


@dataclass
class BalancerProfile:
    roster_mapping: Dict[str, str] = field(default_factory=dict)
    overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "BalancerProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            roster_mapping=data.get("roster_mapping", {}),
            overrides=data.get("overrides", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "roster_mapping": self.roster_mapping,
            "overrides": self.overrides,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def apply(self, config: BalancerConfig) -> BalancerConfig:
        if not self.overrides:
            return config
        return config.with_overrides(self.overrides)
