"""
Table configuration.

Validated with pydantic so a bad configuration fails before any hand is
dealt. Defaults live in `holdem.core.rules`.
"""

from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from holdem.core.rules import (
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND, DEFAULT_STARTING_CHIPS,
    MAX_PLAYERS, MIN_PLAYERS,
)
from holdem.core.state import Blinds, GameState
from holdem.core.table import new_table


class TableConfig(BaseModel):
    """Settings for a table."""
    small_blind: int = Field(gt=0, default=DEFAULT_SMALL_BLIND)
    big_blind: int = Field(gt=0, default=DEFAULT_BIG_BLIND)
    starting_chips: int = Field(gt=0, default=DEFAULT_STARTING_CHIPS)
    max_players: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS, default=MAX_PLAYERS)

    @model_validator(mode="after")
    def check_blinds(self) -> "TableConfig":
        if self.big_blind < self.small_blind:
            raise ValueError("big_blind must be at least small_blind")
        return self

    def blinds(self) -> Blinds:
        return Blinds(small=self.small_blind, big=self.big_blind)

    def create_table(self, player_ids: Sequence[str], dealer: int = 0) -> GameState:
        """Seat the given players for a first hand."""
        if len(player_ids) > self.max_players:
            raise ValueError(f"At most {self.max_players} players, got {len(player_ids)}")
        return new_table(player_ids, self.blinds(), self.starting_chips, dealer=dealer)
