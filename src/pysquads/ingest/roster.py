"""Helpers to load roster CSVs and emit canonical player records."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from pysquads.models import PlayerRecord


logger = logging.getLogger(__name__)

RATING_FIELDS = ("attack_defense", "stamina", "skills", "team_player", "physicality")

DEFAULT_ROSTER_MAPPING = {
    "player_id": "id",
    "name": "name",
    "attack_defense": "attack_defense",
    "stamina": "stamina",
    "skills": "skills",
    "team_player": "team_player",
    "physicality": "physicality",
}


class RosterRow(BaseModel):
    line: int
    raw_id: Optional[str] = None
    raw_name: str
    raw_ratings: dict[str, Optional[str]]

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str], *, line: int) -> "RosterRow":
        def extract(spec: Optional[str | Sequence[str]], *, default: Optional[str] = None) -> Optional[str]:
            if spec is None:
                return default
            if isinstance(spec, str):
                value = row.get(spec)
                return value.strip() if value is not None and value.strip() else default
            parts = [row.get(col, "").strip() for col in spec if row.get(col)]
            return " ".join(parts) if parts else default

        def parse_spec(key: str) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key, DEFAULT_ROSTER_MAPPING.get(key))
            if isinstance(spec, str) and "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        return cls(
            line=line,
            raw_id=extract(parse_spec("player_id")),
            raw_name=extract(parse_spec("name"), default="") or "",
            raw_ratings={name: extract(parse_spec(name)) for name in RATING_FIELDS},
        )


def _parse_rating(raw: Optional[str], *, field: str, line: int) -> Optional[float]:
    if raw is None:
        return None
    try:
        return float(raw.replace(",", "."))
    except ValueError as exc:
        raise ValueError(f"Row {line}: invalid {field} value {raw!r}") from exc


def _read_rows(lines: Iterable[str], mapping: Mapping[str, str]) -> List[RosterRow]:
    reader = csv.DictReader(lines)
    # Header is line 1, so data starts on line 2.
    return [RosterRow.from_mapping(row, mapping, line=idx) for idx, row in enumerate(reader, start=2)]


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterRow]:
    with path.open(newline="", encoding="utf-8") as f:
        return _read_rows(f, mapping or DEFAULT_ROSTER_MAPPING)


def rows_to_records(rows: Sequence[RosterRow]) -> List[PlayerRecord]:
    records: List[PlayerRecord] = []
    for row in rows:
        player_id = row.raw_id or row.raw_name
        if not player_id:
            logger.warning("Skipping roster row %s without id or name", row.line)
            continue
        ratings: dict[str, float] = {}
        for name in RATING_FIELDS:
            value = _parse_rating(row.raw_ratings.get(name), field=name, line=row.line)
            if value is not None:
                ratings[name] = value
        try:
            records.append(PlayerRecord(player_id=player_id, name=row.raw_name, **ratings))
        except ValidationError as exc:
            error = exc.errors()[0]
            location = ".".join(str(part) for part in error.get("loc", ()))
            raise ValueError(f"Row {row.line}: {location} {error['msg']}") from exc
    return records


def load_records_from_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    return rows_to_records(load_roster_csv(path, mapping=mapping))


def parse_roster_text(text: str, *, mapping: Mapping[str, str] | None = None) -> List[PlayerRecord]:
    """Parse CSV content already held in memory (e.g. an upload)."""

    return rows_to_records(_read_rows(StringIO(text), mapping or DEFAULT_ROSTER_MAPPING))
