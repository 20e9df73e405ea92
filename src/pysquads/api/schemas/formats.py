from __future__ import annotations

from pydantic import BaseModel


class MatchFormatResponse(BaseModel):
    key: str
    label: str
    players: int
    team_size: int
