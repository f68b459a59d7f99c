"""
Hand Evaluation for Texas Hold'em.

This module ranks 5-card hands and finds the best 5 cards out of 7.
Every evaluation carries a single integer `value`: higher is better, and
any two hands compare correctly with one numeric comparison.

    value = category * CATEGORY_MULTIPLIER + kicker_value

The kicker value writes the deciding ranks, most important first, as
base-15 digits (ranks go up to 14), so it always stays below the
multiplier and the category dominates.

Hand Rankings (best to worst):
9. Royal Flush: A♠ K♠ Q♠ J♠ T♠
8. Straight Flush: 5 consecutive cards of same suit
7. Four of a Kind: 4 cards of same rank
6. Full House: 3 of a kind + pair
5. Flush: 5 cards of same suit
4. Straight: 5 consecutive cards
3. Three of a Kind: 3 cards of same rank
2. Two Pair: 2 different pairs
1. One Pair: 2 cards of same rank
0. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel), which is 5-high.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Any, Dict, List, Optional, Sequence, Tuple

from holdem.core.card import Card, Rank, RANK_NAMES
from holdem.core.errors import InsufficientCards
from holdem.core.rules import HAND_SIZE


class HandCategory(IntEnum):
    """Hand categories from worst (0) to best (9)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


# Hand category names for display
CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

KICKER_BASE = 15
CATEGORY_MULTIPLIER = KICKER_BASE ** HAND_SIZE


@dataclass(frozen=True)
class HandEvaluation:
    """
    Result of evaluating a hand.

    Attributes:
        category: Hand category (0 = high card ... 9 = royal flush)
        value: Comparable strength including kickers, higher is better
        description: Human readable, e.g. "Full House, Aces full of Kings"
        cards: The 5 cards making the hand, most significant first
    """
    category: HandCategory
    value: int
    description: str
    cards: Tuple[Card, ...]

    @property
    def name(self) -> str:
        return CATEGORY_NAMES[self.category]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": int(self.category),
            "name": self.name,
            "value": self.value,
            "description": self.description,
            "cards": [card.short_str for card in self.cards],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> HandEvaluation:
        return cls(
            category=HandCategory(data["category"]),
            value=data["value"],
            description=data["description"],
            cards=tuple(Card.from_string(s) for s in data["cards"]),
        )


def evaluate_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Evaluate exactly 5 cards.

    Raises:
        ValueError: If not exactly 5 cards provided
    """
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Need exactly 5 cards, got {len(cards)}")

    # Sort by rank descending
    sorted_cards = sorted(cards, key=lambda c: c.rank, reverse=True)
    ranks = [c.rank for c in sorted_cards]

    is_flush = len({c.suit for c in sorted_cards}) == 1
    straight_high = _straight_high(ranks)

    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True)

    if straight_high is not None and is_flush:
        if straight_high == Rank.ACE:
            category = HandCategory.ROYAL_FLUSH
            description = "Royal Flush"
        else:
            category = HandCategory.STRAIGHT_FLUSH
            description = f"Straight Flush, {_rank_name(straight_high)} high"
        if straight_high == Rank.FIVE:
            sorted_cards = _reorder_wheel(sorted_cards)
        return _result(category, [straight_high], description, sorted_cards)

    if counts == [4, 1]:
        quad_rank = _get_rank_with_count(rank_counts, 4)
        kicker = _get_rank_with_count(rank_counts, 1)
        return _result(
            HandCategory.FOUR_OF_A_KIND, [quad_rank, kicker],
            f"Four of a Kind, {_plural(quad_rank)}",
            _sort_by_count(sorted_cards, rank_counts),
        )

    if counts == [3, 2]:
        trips_rank = _get_rank_with_count(rank_counts, 3)
        pair_rank = _get_rank_with_count(rank_counts, 2)
        return _result(
            HandCategory.FULL_HOUSE, [trips_rank, pair_rank],
            f"Full House, {_plural(trips_rank)} full of {_plural(pair_rank)}",
            _sort_by_count(sorted_cards, rank_counts),
        )

    if is_flush:
        return _result(
            HandCategory.FLUSH, ranks,
            f"Flush, {_rank_name(ranks[0])} high",
            sorted_cards,
        )

    if straight_high is not None:
        if straight_high == Rank.FIVE:
            sorted_cards = _reorder_wheel(sorted_cards)
            description = "Straight, Five high (Wheel)"
        else:
            description = f"Straight, {_rank_name(straight_high)} high"
        return _result(HandCategory.STRAIGHT, [straight_high], description, sorted_cards)

    if counts == [3, 1, 1]:
        trips_rank = _get_rank_with_count(rank_counts, 3)
        kickers = _ranks_with_count(rank_counts, 1)
        return _result(
            HandCategory.THREE_OF_A_KIND, [trips_rank] + kickers,
            f"Three of a Kind, {_plural(trips_rank)}",
            _sort_by_count(sorted_cards, rank_counts),
        )

    if counts == [2, 2, 1]:
        pairs = _ranks_with_count(rank_counts, 2)
        kicker = _get_rank_with_count(rank_counts, 1)
        return _result(
            HandCategory.TWO_PAIR, pairs + [kicker],
            f"Two Pair, {_plural(pairs[0])} and {_plural(pairs[1])}",
            _sort_by_count(sorted_cards, rank_counts),
        )

    if counts == [2, 1, 1, 1]:
        pair_rank = _get_rank_with_count(rank_counts, 2)
        kickers = _ranks_with_count(rank_counts, 1)
        return _result(
            HandCategory.ONE_PAIR, [pair_rank] + kickers,
            f"Pair of {_plural(pair_rank)}",
            _sort_by_count(sorted_cards, rank_counts),
        )

    return _result(
        HandCategory.HIGH_CARD, ranks,
        f"High Card, {_rank_name(ranks[0])}",
        sorted_cards,
    )


def find_best_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Find the best 5-card hand among 5 or more cards.

    Every 5-card subset is evaluated (21 of them for 7 cards) and the one
    with the highest value wins. When subsets tie, the first one found is
    kept, so the result is deterministic.

    Raises:
        InsufficientCards: If fewer than 5 cards are supplied.
    """
    if len(cards) < HAND_SIZE:
        raise InsufficientCards(f"Need at least 5 cards to evaluate, got {len(cards)}")

    if len(cards) == HAND_SIZE:
        return evaluate_hand(cards)

    best: Optional[HandEvaluation] = None
    for combo in combinations(cards, HAND_SIZE):
        evaluation = evaluate_hand(combo)
        if best is None or evaluation.value > best.value:
            best = evaluation
    return best


def compare_hands(hand1: HandEvaluation, hand2: HandEvaluation) -> int:
    """
    Compare two evaluations.

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    if hand1.value > hand2.value:
        return 1
    if hand1.value < hand2.value:
        return -1
    return 0


def category_of(value: int) -> HandCategory:
    """Recover the category from an evaluation value."""
    return HandCategory(value // CATEGORY_MULTIPLIER)


def _result(
    category: HandCategory,
    kicker_ranks: List[Rank],
    description: str,
    cards: List[Card],
) -> HandEvaluation:
    return HandEvaluation(
        category=category,
        value=_calculate_value(category, kicker_ranks),
        description=description,
        cards=tuple(cards),
    )


def _calculate_value(category: HandCategory, kicker_ranks: List[Rank]) -> int:
    """
    Calculate the comparable value for a category and its deciding ranks.

    Ranks fill base-15 digits from the most significant end, so within a
    category the first differing rank decides.
    """
    kicker_value = 0
    for i, rank in enumerate(kicker_ranks):
        kicker_value += int(rank) * KICKER_BASE ** (HAND_SIZE - 1 - i)
    return int(category) * CATEGORY_MULTIPLIER + kicker_value


def _straight_high(ranks: List[Rank]) -> Optional[Rank]:
    """Return the high card of a straight, or None if the ranks are not one."""
    unique_ranks = sorted(set(ranks), reverse=True)
    if len(unique_ranks) != HAND_SIZE:
        return None

    if unique_ranks[0] - unique_ranks[4] == 4:
        return unique_ranks[0]

    # Wheel (A-2-3-4-5)
    if unique_ranks == [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]:
        return Rank.FIVE

    return None


def _get_rank_with_count(rank_counts: Counter, count: int) -> Rank:
    """Get the rank that appears 'count' times."""
    for rank, c in rank_counts.items():
        if c == count:
            return rank
    raise ValueError(f"No rank with count {count}")


def _ranks_with_count(rank_counts: Counter, count: int) -> List[Rank]:
    """All ranks appearing 'count' times, highest first."""
    return sorted((r for r, c in rank_counts.items() if c == count), reverse=True)


def _sort_by_count(cards: List[Card], rank_counts: Counter) -> List[Card]:
    """Sort cards by count (descending), then by rank (descending)."""
    return sorted(cards, key=lambda c: (rank_counts[c.rank], c.rank), reverse=True)


def _reorder_wheel(cards: List[Card]) -> List[Card]:
    """Reorder wheel straight so Ace is last (5-4-3-2-A)."""
    ace = [c for c in cards if c.rank == Rank.ACE][0]
    others = sorted([c for c in cards if c.rank != Rank.ACE],
                    key=lambda c: c.rank, reverse=True)
    return others + [ace]


def _rank_name(rank: Rank) -> str:
    return RANK_NAMES[rank]


def _plural(rank: Rank) -> str:
    name = RANK_NAMES[rank]
    return "Sixes" if rank == Rank.SIX else f"{name}s"
