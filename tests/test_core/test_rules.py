"""
Tests for rule helpers and constants.
"""

import pytest
from holdem.core.rules import (
    BETTING_STREETS, STREET_CARDS, TOTAL_COMMUNITY_CARDS, GameStatus, can_advance,
    amount_to_call, get_blind_positions, min_raise_to, next_street,
)


class TestStatusOrder:

    def test_forward_moves_allowed(self):
        assert can_advance(GameStatus.WAITING, GameStatus.DEALING)
        assert can_advance(GameStatus.FLOP, GameStatus.TURN)
        # A hand won by fold skips the remaining streets
        assert can_advance(GameStatus.PREFLOP, GameStatus.COMPLETE)

    def test_backward_moves_refused(self):
        assert not can_advance(GameStatus.RIVER, GameStatus.FLOP)
        assert not can_advance(GameStatus.TURN, GameStatus.TURN)
        assert not can_advance(GameStatus.SHOWDOWN, GameStatus.PREFLOP)

    def test_next_hand_after_complete(self):
        assert can_advance(GameStatus.COMPLETE, GameStatus.WAITING)

    def test_next_street(self):
        assert next_street(GameStatus.PREFLOP) == GameStatus.FLOP
        assert next_street(GameStatus.RIVER) == GameStatus.SHOWDOWN
        with pytest.raises(ValueError):
            next_street(GameStatus.SHOWDOWN)

    def test_street_cards_fill_the_board(self):
        assert sum(STREET_CARDS.values()) == TOTAL_COMMUNITY_CARDS
        assert set(STREET_CARDS) == set(BETTING_STREETS) - {GameStatus.RIVER}


class TestBlindPositions:

    def test_heads_up_dealer_is_small_blind(self):
        assert get_blind_positions(2, 0) == (0, 1)
        assert get_blind_positions(2, 1) == (1, 0)

    def test_full_table(self):
        assert get_blind_positions(6, 0) == (1, 2)
        assert get_blind_positions(6, 5) == (0, 1)

    def test_needs_two_players(self):
        with pytest.raises(ValueError):
            get_blind_positions(1, 0)


class TestBetSizes:

    @pytest.mark.parametrize("current_bet,big_blind,expected", [
        (20, 20, 40),
        (10, 20, 30),
        (50, 20, 100),
        (300, 20, 600),
    ])
    def test_min_raise_to(self, current_bet, big_blind, expected):
        assert min_raise_to(current_bet, big_blind) == expected

    def test_amount_to_call(self):
        assert amount_to_call(50, 20) == 30
        assert amount_to_call(50, 50) == 0
        assert amount_to_call(20, 50) == 0
