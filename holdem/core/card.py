"""
Card and Hand types for Texas Hold'em.

Cards travel between the engine and its callers in a compact two-character
text form: a rank character followed by a suit character ("As", "Td", "2h").
That form is stable and round-trips exactly through `Card.from_string` and
`Card.short_str`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Iterable, List, Sequence, Tuple

from holdem.core.errors import InvalidCardFormat, InvalidHand


class Suit(str, Enum):
    """Card suits, valued by their compact character."""
    HEARTS = "h"    # ♥
    DIAMONDS = "d"  # ♦
    CLUBS = "c"     # ♣
    SPADES = "s"    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (14, highest)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

# Compact characters, 2 .. Ace
RANK_CHARS = dict(zip(Rank, "23456789TJQKA"))

RANK_NAMES = {
    Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
    Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
    Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
    Rank.ACE: "Ace",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_SUIT = {s.value: s for s in Suit}


@dataclass(frozen=True)
class Card:
    """
    A playing card represented as (rank, suit).

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - Plain values: Card(14, "s")
    - Compact notation: Card.from_string("As")

    Equality and hashing are by (rank, suit).
    """
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "rank", Rank(self.rank))
            object.__setattr__(self, "suit", Suit(self.suit))
        except ValueError as exc:
            raise InvalidCardFormat(f"Invalid card: {self.rank!r}, {self.suit!r}") from exc

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from compact notation ("As", "Kh", "Td", "2c").

        Raises:
            InvalidCardFormat: wrong length, unknown rank or unknown suit.
        """
        if not isinstance(s, str) or len(s) != 2:
            raise InvalidCardFormat(f"Invalid card string: {s!r}")

        rank_char, suit_char = s[0], s[1]
        if rank_char not in CHAR_TO_RANK:
            raise InvalidCardFormat(f"Invalid rank: {rank_char!r}")
        if suit_char not in CHAR_TO_SUIT:
            raise InvalidCardFormat(f"Invalid suit: {suit_char!r}")

        return cls(CHAR_TO_RANK[rank_char], CHAR_TO_SUIT[suit_char])

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self.rank]}{self.suit.value}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> str:
        """Cards serialize to their compact text form."""
        return self.short_str

    @classmethod
    def from_dict(cls, data: str) -> Card:
        return cls.from_string(data)

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{SUIT_SYMBOLS[self.suit]}"


@dataclass(frozen=True)
class Hand:
    """A player's hole cards: exactly two distinct cards."""
    cards: Tuple[Card, Card]

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        if len(cards) != 2:
            raise InvalidHand(f"A hand needs exactly 2 cards, got {len(cards)}")
        if cards[0] == cards[1]:
            raise InvalidHand(f"Duplicate card in hand: {cards[0].short_str}")
        object.__setattr__(self, "cards", cards)

    @classmethod
    def from_string(cls, s: str) -> Hand:
        return cls(tuple(parse_cards(s)))

    def to_dict(self) -> List[str]:
        return [card.short_str for card in self.cards]

    @classmethod
    def from_dict(cls, data: Sequence[str]) -> Hand:
        return cls(tuple(Card.from_string(s) for s in data))

    def __str__(self) -> str:
        return " ".join(card.short_str for card in self.cards)


def is_valid_hand(value: Any) -> bool:
    """Check that a serialized hand holds exactly two distinct valid cards."""
    if isinstance(value, Hand):
        return True
    if not isinstance(value, (list, tuple)):
        return False
    try:
        Hand.from_dict(value)
    except (InvalidCardFormat, InvalidHand):
        return False
    return True


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh Td" (space-separated)
    - "AsKhTd" (no separator, 2 chars each)

    Returns:
        List of Card objects
    """
    cards_str = cards_str.strip()

    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]

    if len(cards_str) % 2 != 0:
        raise InvalidCardFormat(f"Cannot split into cards: {cards_str!r}")
    return [Card.from_string(cards_str[i:i + 2]) for i in range(0, len(cards_str), 2)]


def format_cards(cards: Iterable[Card]) -> str:
    """Space-separated compact form, e.g. 'As Kh Td'."""
    return " ".join(card.short_str for card in cards)
