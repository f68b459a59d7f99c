"""
Texas Hold'em Rules and Constants.

No-Limit rules as this engine plays them:

1. Heads-up (2 players): Dealer posts small blind, non-dealer posts big blind.
   Preflop: Dealer acts first. Postflop: Non-dealer acts first.

2. Minimum bet: the big blind.

3. Minimum raise: the new round bet must reach at least
   current_bet + max(current_bet, big_blind).

4. All-in: always allowed while the player has chips. An all-in above the
   current bet raises it, an all-in at or below it is a short call.

5. Side pots: When players are all-in for different amounts, a separate
   pot is created for each contribution level.
"""

from __future__ import annotations
from enum import Enum
from typing import Tuple


class GameStatus(Enum):
    """Phases of a hand, in the only order they may occur."""
    WAITING = "WAITING"      # Waiting for hand to start
    DEALING = "DEALING"      # Shuffling, posting blinds, dealing hole cards
    PREFLOP = "PREFLOP"      # After hole cards dealt, before flop
    FLOP = "FLOP"            # After 3 community cards
    TURN = "TURN"            # After 4th community card
    RIVER = "RIVER"          # After 5th community card
    SHOWDOWN = "SHOWDOWN"    # Determine winner
    COMPLETE = "COMPLETE"    # Pot distributed


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    BET = "BET"
    RAISE = "RAISE"
    ALL_IN = "ALL_IN"


STATUS_ORDER: Tuple[GameStatus, ...] = tuple(GameStatus)

BETTING_STREETS = (
    GameStatus.PREFLOP,
    GameStatus.FLOP,
    GameStatus.TURN,
    GameStatus.RIVER,
)

# Sentinel for "nobody can act"
NO_ACTOR = -1

# Default table settings
DEFAULT_SMALL_BLIND = 10
DEFAULT_BIG_BLIND = 20
DEFAULT_STARTING_CHIPS = 1000
MIN_PLAYERS = 2
MAX_PLAYERS = 9

# Cards per phase
DECK_SIZE = 52
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
BURN_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand

# Cards dealt when leaving each street
STREET_CARDS = {
    GameStatus.PREFLOP: FLOP_CARDS,
    GameStatus.FLOP: TURN_CARDS,
    GameStatus.TURN: RIVER_CARDS,
}


def can_advance(current: GameStatus, target: GameStatus) -> bool:
    """
    Check whether moving from `current` to `target` respects the status order.

    Only forward moves are allowed. Skipping ahead is fine (a hand won by
    fold goes straight to COMPLETE); going back is not, except that a
    finished hand may be returned to WAITING for the next deal.
    """
    if current == GameStatus.COMPLETE and target == GameStatus.WAITING:
        return True
    return STATUS_ORDER.index(target) > STATUS_ORDER.index(current)


def next_street(status: GameStatus) -> GameStatus:
    """The status that follows a betting street."""
    if status not in BETTING_STREETS:
        raise ValueError(f"{status.value} is not a betting street")
    return STATUS_ORDER[STATUS_ORDER.index(status) + 1]


def get_blind_positions(num_players: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    In heads-up play, the dealer posts the small blind.

    Args:
        num_players: Number of players dealt in
        dealer_position: Position of the dealer among them (0-indexed)

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_players < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")

    if num_players == 2:
        # Heads-up: Dealer is small blind
        sb_pos = dealer_position
        bb_pos = (dealer_position + 1) % num_players
    else:
        # Standard: SB is left of dealer, BB is left of SB
        sb_pos = (dealer_position + 1) % num_players
        bb_pos = (dealer_position + 2) % num_players

    return sb_pos, bb_pos


def min_raise_to(current_bet: int, big_blind: int) -> int:
    """
    Calculate the minimum total round bet for a raise.

    The raise increment is the larger of the current bet and the big blind,
    so facing a bet of 20 with a 20 big blind, the minimum raise is to 40.
    """
    return current_bet + max(current_bet, big_blind)


def amount_to_call(current_bet: int, round_bet: int) -> int:
    """Chips needed to match the current bet (never negative)."""
    return max(0, current_bet - round_bet)
