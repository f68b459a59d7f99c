"""
Deck of 52 cards with a dealing cursor.

A `Deck` is an immutable value: shuffling and dealing return a new deck and
leave the original alone. The cursor (`dealt_index`) only moves forward until
`reset` puts it back at 0.

Usage:
    deck = shuffle(create_deck(), SecureRandom())
    deck, hole_cards = deal(deck, 2)
    deck, flop = deal(deck, 3)
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
from typing import Any, Dict, List, Tuple

from holdem.core.card import Card, Rank, Suit
from holdem.core.errors import InsufficientCards, NegativeCount
from holdem.core.rules import BURN_CARDS
from holdem.core.rng import RandomSource


logger = logging.getLogger(__name__)

# Canonical order: suit by suit, each from Two up to Ace
SUIT_ORDER = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)


@dataclass(frozen=True)
class Deck:
    """An ordered sequence of cards plus the index of the next card to deal."""
    cards: Tuple[Card, ...]
    dealt_index: int = 0

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self.cards) - self.dealt_index

    @property
    def dealt_cards(self) -> Tuple[Card, ...]:
        """Cards that have been dealt so far."""
        return self.cards[:self.dealt_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cards": [card.short_str for card in self.cards],
            "dealt_index": self.dealt_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Deck:
        return cls(
            cards=tuple(Card.from_string(s) for s in data["cards"]),
            dealt_index=data.get("dealt_index", 0),
        )

    def __len__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def create_deck() -> Deck:
    """Create a standard 52-card deck in canonical (unshuffled) order."""
    cards = tuple(
        Card(rank, suit)
        for suit in SUIT_ORDER
        for rank in Rank
    )
    return Deck(cards=cards)


def shuffle(deck: Deck, rng: RandomSource) -> Deck:
    """Return a new deck with the cards permuted by `rng` and the cursor at 0."""
    logger.debug(f"Shuffling {len(deck.cards)} cards with {rng!r}")
    return Deck(cards=tuple(rng.shuffle(deck.cards)), dealt_index=0)


def deal(deck: Deck, n: int = 1) -> Tuple[Deck, List[Card]]:
    """
    Deal n cards from the cursor position.

    Returns:
        Tuple of (new deck, dealt cards). Dealing 0 cards returns the same deck.

    Raises:
        NegativeCount: If n < 0.
        InsufficientCards: If not enough cards remain.
    """
    if n < 0:
        raise NegativeCount(f"Cannot deal a negative number of cards: {n}")
    if n == 0:
        return deck, []
    if n > deck.remaining:
        raise InsufficientCards(
            f"Cannot deal {n} cards, only {deck.remaining} remain"
        )

    start = deck.dealt_index
    dealt = list(deck.cards[start:start + n])
    return replace(deck, dealt_index=start + n), dealt


def deal_one(deck: Deck) -> Tuple[Deck, Card]:
    """Deal a single card."""
    deck, cards = deal(deck, 1)
    return deck, cards[0]


def burn(deck: Deck) -> Deck:
    """Burn (discard) the top card."""
    deck, _ = deal(deck, BURN_CARDS)
    return deck


def remaining(deck: Deck) -> int:
    """Number of cards left to deal."""
    return deck.remaining


def reset(deck: Deck) -> Deck:
    """Put the cursor back at 0 without changing the card order."""
    return replace(deck, dealt_index=0)
