"""Player models."""

from .player import PlayerRecord, Position, position_for_rating

__all__ = ["PlayerRecord", "Position", "position_for_rating"]
