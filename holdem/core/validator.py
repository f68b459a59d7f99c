"""
Action validation.

Checks whether a player may take an action in a given state before anything
is changed. Rule violations are returned as a `ValidationResult` with a
reason a client can show; nothing here raises for an illegal move.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from holdem.core.actions import AllIn, Bet, Call, Check, Fold, PlayerAction, Raise
from holdem.core.player import Player
from holdem.core.rules import amount_to_call, min_raise_to
from holdem.core.state import GameState


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating an action."""
    valid: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


VALID = ValidationResult(True)


def invalid(reason: str) -> ValidationResult:
    return ValidationResult(False, reason)


def validate_action(state: GameState, player_id: str, action: PlayerAction) -> ValidationResult:
    """
    Validate a player action against the current state.

    Args:
        state: Current game state
        player_id: Player attempting the action
        action: The requested action

    Returns:
        ValidationResult, with the reason set when the action is illegal
    """
    general = _validate_preconditions(state, player_id)
    if not general.valid:
        return general

    player = state.get_player(player_id)

    if isinstance(action, Fold):
        return VALID
    if isinstance(action, Check):
        return _validate_check(state, player)
    if isinstance(action, Call):
        return _validate_call(state, player)
    if isinstance(action, Bet):
        return _validate_bet(state, player, action.amount)
    if isinstance(action, Raise):
        return _validate_raise(state, player, action.amount)
    if isinstance(action, AllIn):
        return _validate_all_in(player)
    return invalid(f"Unknown action: {action!r}")


def _validate_preconditions(state: GameState, player_id: str) -> ValidationResult:
    if not state.is_betting:
        return invalid("No betting round in progress")

    index = state.player_index(player_id)
    if index < 0:
        return invalid(f"Unknown player: {player_id}")

    if index != state.current_actor:
        return invalid("It's not your turn")

    player = state.players[index]
    if player.has_folded:
        return invalid("Player has already folded")
    if not player.is_active:
        return invalid("Player is not active in this hand")
    if player.is_all_in:
        return invalid("Player is already all-in")

    return VALID


def _validate_check(state: GameState, player: Player) -> ValidationResult:
    chips_to_call = amount_to_call(state.current_bet, player.bet_this_round)
    if chips_to_call > 0:
        return invalid(f"Cannot check, must call ${chips_to_call}")
    return VALID


def _validate_call(state: GameState, player: Player) -> ValidationResult:
    # A call the player cannot cover is allowed; it becomes an all-in for less
    if amount_to_call(state.current_bet, player.bet_this_round) <= 0:
        return invalid("Nothing to call, use CHECK")
    return VALID


def _validate_bet(state: GameState, player: Player, amount: int) -> ValidationResult:
    if state.current_bet > 0:
        return invalid("Cannot bet when there's already a bet, use RAISE")

    min_bet = state.blinds.big
    if amount < min_bet:
        return invalid(f"Minimum bet is ${min_bet}")

    if amount - player.bet_this_round > player.chips:
        return invalid(f"Cannot bet more than stack (${player.chips})")

    return VALID


def _validate_raise(state: GameState, player: Player, amount: int) -> ValidationResult:
    if state.current_bet == 0:
        return invalid("No bet to raise, use BET")

    min_total = min_raise_to(state.current_bet, state.blinds.big)
    if amount < min_total:
        return invalid(f"Minimum raise is to ${min_total} (current: ${state.current_bet})")

    if amount - player.bet_this_round > player.chips:
        return invalid(f"Cannot raise more than stack (${player.chips}), use ALL_IN")

    return VALID


def _validate_all_in(player: Player) -> ValidationResult:
    if player.chips <= 0:
        return invalid("Cannot go all-in with no chips remaining")
    return VALID
