"""
Pytest configuration and shared fixtures for holdem tests.
"""

import pytest
from holdem.core.card import Hand, parse_cards
from holdem.core.player import Player
from holdem.core.rng import SeededRandom
from holdem.core.rules import GameStatus
from holdem.core.state import Blinds, GameState, recalculate_pot
from holdem.config import TableConfig


def cards(text):
    """Shorthand: cards("As Kh") -> [Card(As), Card(Kh)]."""
    return parse_cards(text)


@pytest.fixture
def seeded_rng():
    """Deterministic randomness for replayable deals."""
    return SeededRandom(42)


@pytest.fixture
def blinds():
    return Blinds(small=10, big=20)


@pytest.fixture
def table_config():
    return TableConfig(small_blind=10, big_blind=20, starting_chips=1000)


@pytest.fixture
def two_player_table(table_config):
    """A heads-up table waiting for its first hand."""
    return table_config.create_table(["alice", "bob"])


@pytest.fixture
def three_player_table(table_config):
    return table_config.create_table(["alice", "bob", "carol"])


@pytest.fixture
def make_player():
    """Factory for players; `hand` may be given as text like 'As Kd'."""
    def _make(pid, chips=1000, position=0, hand=None, **kwargs):
        if isinstance(hand, str):
            hand = Hand.from_string(hand)
        return Player(id=pid, chips=chips, position=position, hand=hand, **kwargs)
    return _make


@pytest.fixture
def make_state(blinds):
    """
    Factory for betting states.

    The pot is rebuilt from the players' total bets so it is always
    consistent with them.
    """
    def _make(players, current_bet=0, current_actor=0, status=GameStatus.FLOP,
              community=None, dealer=0, hand_number=1):
        state = GameState(
            status=status,
            players=tuple(players),
            blinds=blinds,
            community_cards=tuple(cards(community)) if community else (),
            current_bet=current_bet,
            dealer=dealer,
            current_actor=current_actor,
            hand_number=hand_number,
        )
        return recalculate_pot(state)
    return _make


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return cards("Ah Kh Qh Jh Th")


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return cards("9h 8h 7h 6h 5h")


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return cards("As 2h 3d 4c 5s")
