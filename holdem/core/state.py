"""
Game state snapshot.

A `GameState` is everything the engine needs to rule on the next action.
It is immutable: the betting reducer and the street logic return new
snapshots and never keep one between calls.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from holdem.core.card import Card
from holdem.core.player import Player
from holdem.core.pot import Contribution, Pot, calculate_pot
from holdem.core.rules import BETTING_STREETS, NO_ACTOR, GameStatus


@dataclass(frozen=True)
class Blinds:
    """Small and big blind sizes."""
    small: int
    big: int

    def __post_init__(self) -> None:
        if self.small <= 0 or self.big <= 0:
            raise ValueError("Blinds must be positive")

    def to_dict(self) -> Dict[str, int]:
        return {"small": self.small, "big": self.big}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> Blinds:
        return cls(small=data["small"], big=data["big"])


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of one hand.

    Attributes:
        status: Current phase of the hand
        players: Players in seat order
        pot: Main pot and side pots built from contributions so far
        community_cards: Board cards dealt so far
        current_bet: Highest round bet this street
        dealer: Index of the dealer button in `players`
        current_actor: Index of the player to act, or NO_ACTOR
        hand_number: Hands played at this table, including this one
        blinds: Blind sizes
    """
    status: GameStatus
    players: Tuple[Player, ...]
    blinds: Blinds
    pot: Pot = Pot()
    community_cards: Tuple[Card, ...] = ()
    current_bet: int = 0
    dealer: int = 0
    current_actor: int = NO_ACTOR
    hand_number: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "community_cards", tuple(self.community_cards))
        if self.current_bet < 0:
            raise ValueError("Current bet cannot be negative")

    @property
    def current_player(self) -> Optional[Player]:
        """The player whose turn it is to act."""
        if 0 <= self.current_actor < len(self.players):
            return self.players[self.current_actor]
        return None

    @property
    def is_betting(self) -> bool:
        return self.status in BETTING_STREETS

    @property
    def players_in_hand(self) -> Tuple[Player, ...]:
        """Players still contesting the pot."""
        return tuple(p for p in self.players if p.in_hand)

    def player_index(self, player_id: str) -> int:
        """Seat index of `player_id`, or -1 if not seated."""
        for i, player in enumerate(self.players):
            if player.id == player_id:
                return i
        return -1

    def get_player(self, player_id: str) -> Optional[Player]:
        index = self.player_index(player_id)
        return self.players[index] if index >= 0 else None

    def contributions(self) -> Tuple[Contribution, ...]:
        """Each player's total bet this hand, as seen by the pot calculator."""
        return contributions_from_players(self.players)

    def with_player(self, index: int, player: Player) -> GameState:
        """Copy of this state with the player at `index` replaced."""
        players = list(self.players)
        players[index] = player
        return replace(self, players=tuple(players))

    def to_dict(self, hide_cards: bool = False) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "players": [p.to_dict(hide_cards=hide_cards) for p in self.players],
            "pot": self.pot.to_dict(),
            "community_cards": [c.short_str for c in self.community_cards],
            "current_bet": self.current_bet,
            "dealer": self.dealer,
            "current_actor": self.current_actor,
            "hand_number": self.hand_number,
            "blinds": self.blinds.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        """
        Build a state from `to_dict` output.

        No validation beyond what the value types enforce; use
        `holdem.schemas.load_game_state` for untrusted input.
        """
        return cls(
            status=GameStatus(data["status"]),
            players=tuple(Player.from_dict(p) for p in data["players"]),
            pot=Pot.from_dict(data["pot"]),
            community_cards=tuple(Card.from_string(s) for s in data["community_cards"]),
            current_bet=data["current_bet"],
            dealer=data["dealer"],
            current_actor=data["current_actor"],
            hand_number=data["hand_number"],
            blinds=Blinds.from_dict(data["blinds"]),
        )


def contributions_from_players(players: Sequence[Player]) -> Tuple[Contribution, ...]:
    return tuple(
        Contribution(player_id=p.id, amount=p.total_bet, is_all_in=p.is_all_in)
        for p in players
    )


def recalculate_pot(state: GameState) -> GameState:
    """Rebuild the pot from the players' total bets."""
    return replace(state, pot=calculate_pot(state.contributions()))
