"""
Tests for pot and side pot calculation.
"""

import pytest
from holdem.core.pot import (
    Contribution, Pot, PotError, SidePot, Winner, calculate_pot, create_empty_pot,
    distribute_pot, pot_eligibility, split_pot,
)


def contrib(player_id, amount, all_in=False):
    return Contribution(player_id=player_id, amount=amount, is_all_in=all_in)


class TestCalculatePot:
    """Tests for building main and side pots."""

    def test_empty(self):
        assert calculate_pot([]) == Pot()
        assert create_empty_pot().total == 0

    def test_zero_contributions_ignored(self):
        pot = calculate_pot([contrib("p1", 0), contrib("p2", 0, all_in=True)])
        assert pot.main == 0
        assert pot.side == ()

    def test_no_all_in_single_pot(self):
        pot = calculate_pot([contrib("p1", 100), contrib("p2", 100), contrib("p3", 40)])
        assert pot.main == 240
        assert pot.side == ()

    def test_three_tiers(self):
        """Players at 30 (all-in), 60 (all-in), 100 and 100."""
        pot = calculate_pot([
            contrib("p1", 30, all_in=True),
            contrib("p2", 60, all_in=True),
            contrib("p3", 100),
            contrib("p4", 100),
        ])
        assert pot.main == 120
        assert pot.side == (
            SidePot(90, ("p2", "p3", "p4")),
            SidePot(80, ("p3", "p4")),
        )
        assert pot.total == 290
        assert pot.num_pots == 3

    def test_order_of_contributions_does_not_matter(self):
        forward = [contrib("p1", 30, True), contrib("p2", 60, True), contrib("p3", 100)]
        assert calculate_pot(forward).total == calculate_pot(list(reversed(forward))).total
        assert calculate_pot(forward).main == calculate_pot(list(reversed(forward))).main

    def test_equal_all_ins_share_a_level(self):
        pot = calculate_pot([
            contrib("p1", 50, all_in=True),
            contrib("p2", 50, all_in=True),
            contrib("p3", 100),
            contrib("p4", 100),
        ])
        assert pot.main == 200
        assert len(pot.side) == 1
        assert pot.side[0].amount == 100
        assert all(side.amount > 0 for side in pot.side)

    def test_uncalled_excess_is_its_own_tier(self):
        pot = calculate_pot([contrib("p1", 50, all_in=True), contrib("p2", 200)])
        assert pot.main == 100
        assert pot.side == (SidePot(150, ("p2",)),)

    def test_conserves_chips_with_many_all_ins(self):
        contributions = [
            contrib("p1", 15, True),
            contrib("p2", 40, True),
            contrib("p3", 75, True),
            contrib("p4", 120, True),
            contrib("p5", 200, True),
            contrib("p6", 333, True),
            contrib("p7", 500),
        ]
        pot = calculate_pot(contributions)
        assert pot.total == sum(c.amount for c in contributions)
        assert pot.num_pots == 7
        eligible = [len(s.eligible_players) for s in pot.side]
        assert eligible == sorted(eligible, reverse=True)

    def test_eligibility_main_pot_first(self):
        eligibility = pot_eligibility([
            contrib("p1", 30, True),
            contrib("p2", 60, True),
            contrib("p3", 100),
        ])
        assert set(eligibility[0]) == {"p1", "p2", "p3"}
        assert eligibility[1:] == [("p2", "p3"), ("p3",)]

    def test_pot_round_trips_through_dict(self):
        pot = calculate_pot([contrib("p1", 30, True), contrib("p2", 60)])
        assert Pot.from_dict(pot.to_dict()) == pot


class TestSplitPot:
    """Tests for dividing one pot among tied winners."""

    def test_even_split(self):
        assert split_pot(100, ["a", "b"]) == [("a", 50), ("b", 50)]

    def test_remainder_to_first_winners(self):
        assert split_pot(100, ["a", "b", "c"]) == [("a", 34), ("b", 33), ("c", 33)]

    @pytest.mark.parametrize("amount,num_winners", [(7, 2), (101, 4), (5, 5), (3, 7), (0, 3)])
    def test_amount_conserved(self, amount, num_winners):
        winners = [f"p{i}" for i in range(num_winners)]
        shares = [share for _, share in split_pot(amount, winners)]
        assert sum(shares) == amount
        assert max(shares) - min(shares) <= 1
        assert sum(1 for share in shares if share == amount // num_winners + 1) == amount % num_winners

    def test_no_winners(self):
        assert split_pot(100, []) == []


class TestDistributePot:
    """Tests for paying pots to winners."""

    def test_single_winner(self):
        result = distribute_pot(Pot(main=300), [Winner("p1", 0)])
        assert result.success
        assert result.amount_for("p1") == 300
        assert result.error is None

    def test_three_way_split_remainder(self):
        result = distribute_pot(Pot(main=100), [Winner("p1", 0), Winner("p2", 0), Winner("p3", 0)])
        assert result.success
        assert [(d.player_id, d.amount) for d in result.distributions] == [
            ("p1", 34), ("p2", 33), ("p3", 33),
        ]

    def test_side_pots_paid_separately(self):
        pot = Pot(main=120, side=(SidePot(90, ("p2", "p3", "p4")), SidePot(80, ("p3", "p4"))))
        result = distribute_pot(pot, [Winner("p1", 0), Winner("p2", 1), Winner("p3", 2)])
        assert result.success
        assert result.amount_for("p1") == 120
        assert result.amount_for("p2") == 90
        assert result.amount_for("p3") == 80
        assert result.total == pot.total

    def test_same_player_wins_several_pots(self):
        pot = Pot(main=100, side=(SidePot(50, ("p2", "p3")),))
        result = distribute_pot(pot, [Winner("p2", 0), Winner("p2", 1)])
        assert result.success
        assert len(result.distributions) == 1
        assert result.amount_for("p2") == 150

    def test_missing_side_pot_winner(self):
        pot = Pot(main=100, side=(SidePot(50, ("p2", "p3")),))
        result = distribute_pot(pot, [Winner("p1", 0)])
        assert not result.success
        assert result.error == PotError.UNASSIGNED_SIDE_POT
        assert result.distributions == ()

    def test_missing_main_pot_winner(self):
        pot = Pot(main=100, side=(SidePot(50, ("p2", "p3")),))
        result = distribute_pot(pot, [Winner("p2", 1)])
        assert not result.success
        assert result.error == PotError.UNASSIGNED_MAIN_POT

    def test_no_winners_for_chips(self):
        result = distribute_pot(Pot(main=100), [])
        assert not result.success
        assert result.error == PotError.UNASSIGNED_MAIN_POT

    def test_no_winners_for_empty_pot(self):
        result = distribute_pot(Pot(), [])
        assert result.success
        assert result.total == 0

    @pytest.mark.parametrize("index", [2, 5, -1])
    def test_invalid_pot_index(self, index):
        pot = Pot(main=100, side=(SidePot(50, ("p2", "p3")),))
        result = distribute_pot(pot, [Winner("p1", 0), Winner("p2", 1), Winner("p3", index)])
        assert not result.success
        assert result.error == PotError.INVALID_POT_INDEX

    def test_full_round_trip_conserves_chips(self):
        contributions = [
            contrib("p1", 25, True),
            contrib("p2", 80, True),
            contrib("p3", 80, True),
            contrib("p4", 300),
            contrib("p5", 300),
        ]
        pot = calculate_pot(contributions)
        winners = [Winner("p1", 0)] + [Winner("p2", 1), Winner("p3", 1)] + [Winner("p4", 2)]
        result = distribute_pot(pot, winners)
        assert result.success
        assert result.total == sum(c.amount for c in contributions)
