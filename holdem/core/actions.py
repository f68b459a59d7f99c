"""
Player actions.

An action is one of six small immutable values. `Bet` and `Raise` carry the
player's new total bet for the round; the others carry nothing.

    Fold() | Check() | Call() | Bet(amount) | Raise(amount) | AllIn()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from holdem.core.rules import ActionType


@dataclass(frozen=True)
class Fold:
    type: ClassVar[ActionType] = ActionType.FOLD

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


@dataclass(frozen=True)
class Check:
    type: ClassVar[ActionType] = ActionType.CHECK

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


@dataclass(frozen=True)
class Call:
    type: ClassVar[ActionType] = ActionType.CALL

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


@dataclass(frozen=True)
class Bet:
    """Open the betting; `amount` is the player's round bet afterwards."""
    amount: int
    type: ClassVar[ActionType] = ActionType.BET

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "amount": self.amount}


@dataclass(frozen=True)
class Raise:
    """Raise to `amount`, the player's round bet afterwards (not the increment)."""
    amount: int
    type: ClassVar[ActionType] = ActionType.RAISE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "amount": self.amount}


@dataclass(frozen=True)
class AllIn:
    type: ClassVar[ActionType] = ActionType.ALL_IN

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


PlayerAction = Union[Fold, Check, Call, Bet, Raise, AllIn]

_ACTION_CLASSES = {
    ActionType.FOLD: Fold,
    ActionType.CHECK: Check,
    ActionType.CALL: Call,
    ActionType.BET: Bet,
    ActionType.RAISE: Raise,
    ActionType.ALL_IN: AllIn,
}


def make_action(action_type: ActionType, amount: int = 0) -> PlayerAction:
    """Build an action from its type, e.g. make_action(ActionType.RAISE, 60)."""
    cls = _ACTION_CLASSES[ActionType(action_type)]
    if cls in (Bet, Raise):
        return cls(amount)
    return cls()


def action_from_dict(data: Dict[str, Any]) -> PlayerAction:
    """Inverse of `to_dict`: {"type": "RAISE", "amount": 60} -> Raise(60)."""
    return make_action(ActionType(data["type"]), data.get("amount", 0))
