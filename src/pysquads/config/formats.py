"""Match formats supported by the roster balancer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable


@dataclass(frozen=True)
class MatchFormat:
    key: str
    label: str
    players: int

    @property
    def team_size(self) -> int:
        return self.players // 2


_FORMATS: Dict[str, MatchFormat] = {
    "4V4": MatchFormat(key="4v4", label="4 vs 4", players=8),
    "5V5": MatchFormat(key="5v5", label="5 vs 5", players=10),
    "6V6": MatchFormat(key="6v6", label="6 vs 6", players=12),
    "7V7": MatchFormat(key="7v7", label="7 vs 7", players=14),
}


def iter_formats() -> Iterable[MatchFormat]:
    """Return an iterator of all configured formats, smallest first."""

    return sorted(_FORMATS.values(), key=lambda fmt: fmt.players)


def get_format(key: str) -> MatchFormat:
    """Fetch a format such as ``"5v5"``, raising KeyError if missing."""

    normalized = key.strip().upper()
    if normalized not in _FORMATS:
        raise KeyError(f"No match format configured for {key!r}")
    return _FORMATS[normalized]


def get_format_by_size(players: int) -> MatchFormat:
    for fmt in _FORMATS.values():
        if fmt.players == players:
            return fmt
    raise KeyError(f"No match format configured for {players} players")
