"""
Pot and side pot calculation.

Contributions are turned into a main pot plus side pots by walking the
distinct contribution levels from lowest to highest. Each level forms a tier
funded by everyone who put in at least that much:

    tier amount = (level - previous level) * players at or above level

The lowest tier is the main pot, the rest are side pots in ascending order.
The tiers always add up to the total contributed.

Example: A(30, all-in), B(60, all-in), C(100), D(100)
- Main pot: 30 * 4 = 120 (A, B, C, D eligible)
- Side pot 1: 30 * 3 = 90 (B, C, D eligible)
- Side pot 2: 40 * 2 = 80 (C, D eligible)
"""

from __future__ import annotations
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class SidePot:
    """A side pot and the players who can win it."""
    amount: int
    eligible_players: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": self.amount, "eligible_players": list(self.eligible_players)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SidePot:
        return cls(amount=data["amount"], eligible_players=tuple(data["eligible_players"]))


@dataclass(frozen=True)
class Pot:
    """Main pot amount plus side pots, lowest level first."""
    main: int = 0
    side: Tuple[SidePot, ...] = ()

    @property
    def total(self) -> int:
        """Total amount in all pots."""
        return self.main + sum(pot.amount for pot in self.side)

    @property
    def num_pots(self) -> int:
        """Main pot plus side pots."""
        return 1 + len(self.side)

    def amount_at(self, index: int) -> int:
        """Amount of pot `index` (0 = main, i = side pot i - 1)."""
        return self.main if index == 0 else self.side[index - 1].amount

    def to_dict(self) -> Dict[str, Any]:
        return {"main": self.main, "side": [pot.to_dict() for pot in self.side]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Pot:
        return cls(
            main=data["main"],
            side=tuple(SidePot.from_dict(p) for p in data.get("side", [])),
        )


@dataclass(frozen=True)
class Contribution:
    """Chips a player has put into the pot this hand."""
    player_id: str
    amount: int
    is_all_in: bool = False


@dataclass(frozen=True)
class Winner:
    """A player declared winner of pot `pot_index` (0 = main, 1+ = side pots)."""
    player_id: str
    pot_index: int


@dataclass(frozen=True)
class Distribution:
    """Chips paid out to a player."""
    player_id: str
    amount: int

    def to_dict(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "amount": self.amount}


class PotError(Enum):
    """Why a distribution was refused."""
    UNASSIGNED_MAIN_POT = "UNASSIGNED_MAIN_POT"
    UNASSIGNED_SIDE_POT = "UNASSIGNED_SIDE_POT"
    INVALID_POT_INDEX = "INVALID_POT_INDEX"


@dataclass(frozen=True)
class DistributionResult:
    """Result of distributing a pot."""
    success: bool
    message: str
    distributions: Tuple[Distribution, ...] = ()
    error: Optional[PotError] = None

    @property
    def total(self) -> int:
        return sum(d.amount for d in self.distributions)

    def amount_for(self, player_id: str) -> int:
        return sum(d.amount for d in self.distributions if d.player_id == player_id)


def create_empty_pot() -> Pot:
    return Pot()


def calculate_pot(contributions: Iterable[Contribution]) -> Pot:
    """
    Build the main pot and side pots from player contributions.

    Zero contributions are ignored. Without any all-in the whole amount is a
    single main pot. Equal all-in amounts share one level, so they never
    create an empty tier between them.
    """
    contributors = [c for c in contributions if c.amount > 0]
    if not contributors:
        return Pot()

    if not any(c.is_all_in for c in contributors):
        return Pot(main=sum(c.amount for c in contributors))

    # Sort by contribution amount
    contributors.sort(key=lambda c: c.amount)

    tiers: List[SidePot] = []
    prev_level = 0

    for i, contribution in enumerate(contributors):
        level = contribution.amount
        if level == prev_level:
            continue

        eligible = contributors[i:]
        tiers.append(SidePot(
            amount=(level - prev_level) * len(eligible),
            eligible_players=tuple(c.player_id for c in eligible),
        ))
        prev_level = level

    return Pot(main=tiers[0].amount, side=tuple(tiers[1:]))


def pot_eligibility(contributions: Iterable[Contribution]) -> List[Tuple[str, ...]]:
    """
    Eligible players for each pot `calculate_pot` would build, main pot first.

    The main pot is open to every contributor; side pots carry their own sets.
    """
    contributors = [c for c in contributions if c.amount > 0]
    pot = calculate_pot(contributors)
    main_eligible = tuple(c.player_id for c in sorted(contributors, key=lambda c: c.amount))
    return [main_eligible] + [p.eligible_players for p in pot.side]


def distribute_pot(pot: Pot, winners: Sequence[Winner]) -> DistributionResult:
    """
    Pay each pot to its declared winners.

    Winners are grouped by pot index. A pot split between several winners is
    divided with floor division and the remaining chips go one each to the
    winners in the order they were listed, so the payout always equals the pot.

    Refused (never raised) when a side pot has no winner, when a main pot
    holding chips has no winner, or when a winner names a pot that does not
    exist.
    """
    winners_by_pot: Dict[int, List[str]] = {}
    for winner in winners:
        if winner.pot_index < 0 or winner.pot_index >= pot.num_pots:
            return DistributionResult(
                False,
                f"Invalid pot index {winner.pot_index} (max: {len(pot.side)})",
                error=PotError.INVALID_POT_INDEX,
            )
        winners_by_pot.setdefault(winner.pot_index, []).append(winner.player_id)

    if not winners:
        if pot.total == 0:
            return DistributionResult(True, "Nothing to distribute")
        return DistributionResult(
            False, "No winners declared", error=PotError.UNASSIGNED_MAIN_POT
        )

    if pot.main > 0 and 0 not in winners_by_pot:
        return DistributionResult(
            False, "No winner specified for the main pot",
            error=PotError.UNASSIGNED_MAIN_POT,
        )

    for i in range(1, pot.num_pots):
        if i not in winners_by_pot:
            return DistributionResult(
                False, f"No winner specified for side pot {i}",
                error=PotError.UNASSIGNED_SIDE_POT,
            )

    payouts: Dict[str, int] = OrderedDict()
    for index in range(pot.num_pots):
        pot_winners = winners_by_pot.get(index)
        if not pot_winners:
            continue
        for player_id, amount in split_pot(pot.amount_at(index), pot_winners):
            payouts[player_id] = payouts.get(player_id, 0) + amount

    distributions = tuple(Distribution(pid, amount) for pid, amount in payouts.items())
    return DistributionResult(True, f"Distributed {pot.total}", distributions)


def split_pot(amount: int, winners: Sequence[str]) -> List[Tuple[str, int]]:
    """
    Split an amount among winners.

    The first `amount % len(winners)` winners get one extra chip.
    """
    if not winners:
        return []

    base, remainder = divmod(amount, len(winners))
    return [
        (player_id, base + 1 if i < remainder else base)
        for i, player_id in enumerate(winners)
    ]
