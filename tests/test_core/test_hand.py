"""
Tests for hand evaluation.
"""

from itertools import combinations

import pytest
from holdem.core.card import parse_cards
from holdem.core.errors import InsufficientCards
from holdem.core.hand import (
    CATEGORY_MULTIPLIER, HandCategory, HandEvaluation, category_of, compare_hands,
    evaluate_hand, find_best_hand,
)


def ev(text):
    return evaluate_hand(parse_cards(text))


class TestHandRanking:
    """Tests for recognising each category."""

    def test_royal_flush(self, royal_flush):
        result = evaluate_hand(royal_flush)
        assert result.category == HandCategory.ROYAL_FLUSH
        assert result.category == 9
        assert result.description == "Royal Flush"

    def test_straight_flush(self, straight_flush):
        result = evaluate_hand(straight_flush)
        assert result.category == HandCategory.STRAIGHT_FLUSH
        assert result.description == "Straight Flush, Nine high"

    def test_steel_wheel_is_straight_flush_not_royal(self):
        result = ev("Ad 2d 3d 4d 5d")
        assert result.category == HandCategory.STRAIGHT_FLUSH
        assert [c.short_str for c in result.cards] == ["5d", "4d", "3d", "2d", "Ad"]

    def test_four_of_a_kind(self):
        result = ev("As Ah Ad Ac Ks")
        assert result.category == HandCategory.FOUR_OF_A_KIND
        assert result.description == "Four of a Kind, Aces"

    def test_full_house(self):
        result = ev("As Ah Ad Kc Ks")
        assert result.category == HandCategory.FULL_HOUSE
        assert result.description == "Full House, Aces full of Kings"

    def test_flush(self):
        result = ev("As Ks Js 9s 2s")
        assert result.category == HandCategory.FLUSH
        assert result.description == "Flush, Ace high"

    def test_straight(self):
        result = ev("As Kh Qd Jc Ts")
        assert result.category == HandCategory.STRAIGHT
        assert result.description == "Straight, Ace high"

    def test_wheel_straight(self, wheel_straight):
        result = evaluate_hand(wheel_straight)
        assert result.category == HandCategory.STRAIGHT
        assert "Wheel" in result.description
        assert result.cards[-1].short_str == "As"

    def test_three_of_a_kind(self):
        result = ev("7s 7h 7d Kc 2s")
        assert result.category == HandCategory.THREE_OF_A_KIND
        assert result.description == "Three of a Kind, Sevens"

    def test_two_pair(self):
        result = ev("As Ah Kd Kc Qs")
        assert result.category == HandCategory.TWO_PAIR
        assert result.description == "Two Pair, Aces and Kings"

    def test_one_pair(self):
        result = ev("6s 6h Kd Qc Js")
        assert result.category == HandCategory.ONE_PAIR
        assert result.description == "Pair of Sixes"

    def test_high_card(self):
        result = ev("As Kh 9d 7c 2s")
        assert result.category == HandCategory.HIGH_CARD
        assert result.description == "High Card, Ace"

    def test_near_straight_is_not_straight(self):
        assert ev("As Kh Qd Jc 9s").category == HandCategory.HIGH_CARD
        assert ev("Qs Kh Ad 2c 3s").category == HandCategory.HIGH_CARD

    def test_made_cards_come_first(self):
        result = ev("2s Kh 2d Kc 9s")
        assert [c.rank for c in result.cards] == [13, 13, 2, 2, 9]

    def test_needs_exactly_five(self):
        with pytest.raises(ValueError):
            evaluate_hand(parse_cards("As Kh Qd Jc"))
        with pytest.raises(ValueError):
            evaluate_hand(parse_cards("As Kh Qd Jc Ts 9s"))


class TestHandOrdering:
    """Tests for the single-number comparison."""

    LADDER = [
        "As Kh 9d 7c 2s",   # high card
        "6s 6h Kd Qc Js",   # pair
        "As Ah Kd Kc Qs",   # two pair
        "7s 7h 7d Kc 2s",   # trips
        "As 2h 3d 4c 5s",   # straight
        "As Ks Js 9s 2s",   # flush
        "2s 2h 2d 3c 3s",   # full house
        "2s 2h 2d 2c 3s",   # quads
        "6h 5h 4h 3h 2h",   # straight flush
        "Ah Kh Qh Jh Th",   # royal flush
    ]

    def test_categories_strictly_ordered(self):
        values = [ev(hand).value for hand in self.LADDER]
        assert values == sorted(values)
        assert len(set(values)) == len(values)
        assert [category_of(v) for v in values] == list(HandCategory)

    def test_weakest_of_a_category_beats_best_of_the_one_below(self):
        best_high_card = ev("As Kh Qd Jc 9s")
        worst_pair = ev("2s 2h 3d 4c 5s")
        assert worst_pair.value > best_high_card.value

        best_two_pair = ev("As Ah Ks Kh Qd")
        worst_trips = ev("2s 2h 2d 3c 4s")
        assert worst_trips.value > best_two_pair.value

    def test_category_dominates_value(self):
        for hand in self.LADDER:
            result = ev(hand)
            assert result.value // CATEGORY_MULTIPLIER == result.category

    def test_pair_kickers(self):
        assert ev("As Ah Kd 7c 2s").value > ev("Ac Ad Qd Jc Ts").value
        assert ev("As Ah Kd 7c 3s").value > ev("Ac Ad Kh 7d 2s").value

    def test_two_pair_kicker(self):
        assert ev("As Ah Kd Kc Qs").value > ev("Ac Ad Ks Kh Js").value

    def test_higher_second_pair_wins(self):
        assert ev("As Ah Kd Kc 2s").value > ev("Ac Ad Qs Qh Ks").value

    def test_full_house_trips_first(self):
        assert ev("3s 3h 3d 2c 2s").value > ev("2s 2h 2d As Ah").value

    def test_flush_compares_all_cards(self):
        assert ev("As Ks Js 9s 3s").value > ev("Ah Kh Jh 9h 2h").value

    def test_wheel_is_lowest_straight(self):
        assert ev("6s 5h 4d 3c 2s").value > ev("As 2h 3d 4c 5s").value

    def test_suits_do_not_break_ties(self):
        a = ev("As Kh 9d 7c 2s")
        b = ev("Ad Kc 9h 7s 2d")
        assert a.value == b.value
        assert compare_hands(a, b) == 0

    def test_compare_hands(self):
        better = ev("As Ah Kd Kc Qs")
        worse = ev("6s 6h Kd Qc Js")
        assert compare_hands(better, worse) == 1
        assert compare_hands(worse, better) == -1


class TestFindBestHand:
    """Tests for best-5-of-7 search."""

    def test_finds_flush_among_seven(self):
        result = find_best_hand(parse_cards("As Ks 2d 9s 4s 7s Kd"))
        assert result.category == HandCategory.FLUSH
        assert all(c.suit.value == "s" for c in result.cards)

    def test_board_plays(self):
        result = find_best_hand(parse_cards("2c 3d Ah Kh Qh Jh Th"))
        assert result.category == HandCategory.ROYAL_FLUSH

    @pytest.mark.parametrize("text", [
        "As Ks 2d 9s 4s 7s Kd",
        "2c 2d 2h 5s 5c 9d 9h",
        "Ah 2d 3c 4s 5h 6d Kc",
        "7s 8s 9s Ts Js Qs Ks",
        "2c 4d 6h 8s Tc Qd Ah",
    ])
    def test_equals_max_of_all_subsets(self, text):
        seven = parse_cards(text)
        expected = max(evaluate_hand(list(combo)).value for combo in combinations(seven, 5))
        assert find_best_hand(seven).value == expected

    def test_picks_higher_full_house(self):
        result = find_best_hand(parse_cards("2c 2d 2h 5s 5c 9d 9h"))
        assert result.category == HandCategory.FULL_HOUSE
        assert result.description == "Full House, Twos full of Nines"

    def test_five_cards(self, royal_flush):
        assert find_best_hand(royal_flush) == evaluate_hand(royal_flush)

    def test_six_cards(self):
        result = find_best_hand(parse_cards("As Ah Kd Kc Qs 2d"))
        assert result.category == HandCategory.TWO_PAIR

    def test_too_few_cards(self):
        with pytest.raises(InsufficientCards):
            find_best_hand(parse_cards("As Kh Qd Jc"))

    def test_deterministic(self):
        seven = parse_cards("2c 4d 6h 8s Tc Qd Ah")
        assert find_best_hand(seven) == find_best_hand(list(reversed(seven)))

    def test_evaluation_round_trips_through_dict(self):
        result = find_best_hand(parse_cards("As Ks 2d 9s 4s 7s Kd"))
        data = result.to_dict()
        assert data["category"] == 5
        assert data["name"] == "Flush"
        assert HandEvaluation.from_dict(data) == result
