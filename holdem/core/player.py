"""
Player state for Texas Hold'em.

Tracks, per player:
- Chip count
- Hole cards
- Bet in the current betting round and total bet in the hand
- Active / folded / all-in flags

Players are immutable; every change produces a new `Player` via `replace`.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from holdem.core.card import Hand


@dataclass(frozen=True)
class Player:
    """
    A player at the table.

    Attributes:
        id: Unique identifier for the player
        chips: Chips behind (not yet committed)
        bet_this_round: Amount bet in the current betting round
        total_bet: Total amount bet in the current hand (for pot calculations)
        hand: The player's hole cards, once dealt
        is_active: Dealt into the hand and not folded
        has_folded: Has folded this hand
        is_all_in: Has no chips left behind and cannot act
        position: Seat position at the table (0-indexed)
        name: Display name
        has_acted: Acted since the last bet or raise in this round
    """
    id: str
    chips: int
    position: int = 0
    bet_this_round: int = 0
    total_bet: int = 0
    hand: Optional[Hand] = None
    is_active: bool = True
    has_folded: bool = False
    is_all_in: bool = False
    name: str = ""
    has_acted: bool = False

    def __post_init__(self) -> None:
        if self.chips < 0:
            raise ValueError(f"Player {self.id} cannot have negative chips")
        if self.bet_this_round > self.total_bet:
            raise ValueError(f"Player {self.id} round bet exceeds total bet")
        if self.has_folded and self.is_active:
            raise ValueError(f"Player {self.id} cannot be folded and active")

    @property
    def in_hand(self) -> bool:
        """Still contesting the pot (not folded, dealt in)."""
        return self.is_active and not self.has_folded

    @property
    def can_act(self) -> bool:
        """Able to take an action this round."""
        return self.is_active and not self.has_folded and not self.is_all_in

    def commit(self, amount: int) -> Player:
        """
        Move chips from the stack into the pot.

        Commits at most the whole stack; running out of chips sets all-in.
        """
        actual = min(max(amount, 0), self.chips)
        chips = self.chips - actual
        return replace(
            self,
            chips=chips,
            bet_this_round=self.bet_this_round + actual,
            total_bet=self.total_bet + actual,
            is_all_in=self.is_all_in or (chips == 0 and actual > 0),
        )

    def fold(self) -> Player:
        return replace(self, has_folded=True, is_active=False, has_acted=True)

    def reset_for_new_hand(self) -> Player:
        """Clear hand state; players without chips sit the hand out."""
        return replace(
            self,
            bet_this_round=0,
            total_bet=0,
            hand=None,
            is_active=self.chips > 0,
            has_folded=False,
            is_all_in=False,
            has_acted=False,
        )

    def reset_for_new_round(self) -> Player:
        """Reset the round bet for a new street (flop, turn, river)."""
        return replace(self, bet_this_round=0, has_acted=False)

    def to_dict(self, hide_cards: bool = False) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        return {
            "id": self.id,
            "name": self.name,
            "chips": self.chips,
            "bet_this_round": self.bet_this_round,
            "total_bet": self.total_bet,
            "hand": None if hide_cards or self.hand is None else self.hand.to_dict(),
            "is_active": self.is_active,
            "has_folded": self.has_folded,
            "is_all_in": self.is_all_in,
            "position": self.position,
            "has_acted": self.has_acted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Player:
        hand = data.get("hand")
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            chips=data["chips"],
            bet_this_round=data.get("bet_this_round", 0),
            total_bet=data.get("total_bet", 0),
            hand=Hand.from_dict(hand) if hand else None,
            is_active=data.get("is_active", True),
            has_folded=data.get("has_folded", False),
            is_all_in=data.get("is_all_in", False),
            position=data.get("position", 0),
            has_acted=data.get("has_acted", False),
        )

    def __str__(self) -> str:
        cards_str = str(self.hand) if self.hand else "??"
        return f"Player {self.id} [{cards_str}] ${self.chips}"
