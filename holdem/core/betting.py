"""
Betting round state machine.

`apply_action` takes a state and one action and returns a new state with the
action applied, the pot rebuilt from the players' total bets, and the turn
moved on. Illegal actions come back as a failed `ActionResult`; the input
state is never modified.

Action semantics:
- FOLD: player is out of the hand, current bet unchanged.
- CHECK: only when the player has already matched the current bet.
- CALL: puts in min(current bet - round bet, chips); running out of chips,
  even on a short call, makes the player all-in.
- BET: only when the current bet is 0; sets the round bet and current bet.
- RAISE: only when the current bet is > 0, to at least
  current bet + max(current bet, big blind).
- ALL_IN: commits the whole stack. Above the current bet it is a raise,
  otherwise a short call.

A bet or raise (an all-in raise included) reopens the action: everyone else
who can still act must act again before the round closes.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
from typing import Any, Dict, List, Optional

from holdem.core.actions import AllIn, Bet, Call, Check, Fold, PlayerAction, Raise
from holdem.core.rules import NO_ACTOR, ActionType, amount_to_call, min_raise_to
from holdem.core.state import GameState, recalculate_pot
from holdem.core.validator import validate_action


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Result of a player action."""
    success: bool
    message: str
    state: Optional[GameState] = None
    action_type: Optional[ActionType] = None
    amount: int = 0  # Chips the action put into the pot

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "action_type": self.action_type.value if self.action_type else None,
            "amount": self.amount,
            "state": self.state.to_dict() if self.state else None,
        }


def apply_action(
    state: GameState,
    action: PlayerAction,
    player_id: Optional[str] = None,
) -> ActionResult:
    """
    Process a player action.

    Args:
        state: Current game state (left unchanged)
        action: The action to apply
        player_id: Player taking the action; defaults to the current actor

    Returns:
        ActionResult with the new state on success
    """
    if player_id is None:
        current = state.current_player
        if current is None:
            return ActionResult(False, "No current player")
        player_id = current.id

    validation = validate_action(state, player_id, action)
    if not validation.valid:
        logger.debug(f"Rejected {action!r} from {player_id}: {validation.reason}")
        return ActionResult(False, validation.reason, action_type=action.type)

    index = state.player_index(player_id)
    player = state.players[index]
    current_bet = state.current_bet
    reopen = False

    if isinstance(action, Fold):
        updated = player.fold()
        message = "Folded"

    elif isinstance(action, Check):
        updated = replace(player, has_acted=True)
        message = "Checked"

    elif isinstance(action, Call):
        updated = player.commit(amount_to_call(current_bet, player.bet_this_round))
        message = f"Called ${updated.total_bet - player.total_bet}"

    elif isinstance(action, (Bet, Raise)):
        updated = player.commit(action.amount - player.bet_this_round)
        current_bet = updated.bet_this_round
        reopen = True
        if isinstance(action, Bet):
            message = f"Bet ${action.amount}"
        else:
            message = f"Raised to ${action.amount}"

    elif isinstance(action, AllIn):
        updated = player.commit(player.chips)
        if updated.bet_this_round > current_bet:
            current_bet = updated.bet_this_round
            reopen = True
        message = f"All-in for ${updated.bet_this_round}"

    else:
        return ActionResult(False, f"Unknown action: {action!r}")

    updated = replace(updated, has_acted=True)
    new_state = state.with_player(index, updated)
    if reopen:
        new_state = _reopen_action(new_state, index)
    new_state = recalculate_pot(replace(new_state, current_bet=current_bet, current_actor=index))

    if is_betting_closed(new_state):
        next_actor = NO_ACTOR
    else:
        next_actor = get_next_actor(new_state)
    new_state = replace(new_state, current_actor=next_actor)

    committed = updated.total_bet - player.total_bet
    logger.debug(f"{player_id}: {message} (current bet {current_bet}, pot {new_state.pot.total})")
    return ActionResult(True, message, new_state, action.type, committed)


def get_next_actor(state: GameState) -> int:
    """
    Find the next player to act after the current actor.

    Scans forward around the table, skipping folded, all-in and sitting-out
    players. Returns NO_ACTOR if nobody can act.
    """
    num_players = len(state.players)
    for i in range(1, num_players + 1):
        pos = (state.current_actor + i) % num_players
        if state.players[pos].can_act:
            return pos
    return NO_ACTOR


def is_round_complete(state: GameState) -> bool:
    """
    Check whether the betting round is complete.

    True when at most one player is left in the hand, when nobody left in
    the hand can act, or when every player who can act has matched the
    current bet.
    """
    in_hand = state.players_in_hand
    if len(in_hand) <= 1:
        return True

    can_act = [p for p in in_hand if not p.is_all_in]
    if not can_act:
        return True

    return all(p.bet_this_round == state.current_bet for p in can_act)


def is_betting_closed(state: GameState) -> bool:
    """
    Stricter completion check used to move between streets.

    Besides `is_round_complete`, everyone who can act must have acted since
    the last bet or raise, so the big blind keeps its option preflop and a
    street of checks goes all the way round. A lone player who can still
    act and has matched the bet has nobody left to bet against.
    """
    if not is_round_complete(state):
        return False

    in_hand = state.players_in_hand
    if len(in_hand) <= 1:
        return True

    can_act = [p for p in in_hand if not p.is_all_in]
    if len(can_act) <= 1:
        return True

    return all(p.has_acted for p in can_act)


def legal_actions(state: GameState, player_id: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Get legal actions for a player (the current actor by default).

    Returns:
        List of action dicts with type and constraints
    """
    if player_id is None:
        current = state.current_player
        if current is None:
            return []
        player_id = current.id

    if not validate_action(state, player_id, Fold()).valid:
        return []

    player = state.get_player(player_id)
    chips_to_call = amount_to_call(state.current_bet, player.bet_this_round)
    max_total = player.chips + player.bet_this_round

    # Fold is always available
    actions: List[Dict[str, Any]] = [{"type": ActionType.FOLD.value}]

    if chips_to_call == 0:
        actions.append({"type": ActionType.CHECK.value})
    else:
        actions.append({
            "type": ActionType.CALL.value,
            "amount": min(chips_to_call, player.chips),
        })

    if state.current_bet == 0:
        min_bet = state.blinds.big
        if max_total >= min_bet:
            actions.append({"type": ActionType.BET.value, "min": min_bet, "max": max_total})
    else:
        min_total = min_raise_to(state.current_bet, state.blinds.big)
        if max_total >= min_total:
            actions.append({"type": ActionType.RAISE.value, "min": min_total, "max": max_total})

    if player.chips > 0:
        actions.append({"type": ActionType.ALL_IN.value, "amount": max_total})

    return actions


def _reopen_action(state: GameState, aggressor: int) -> GameState:
    """Everyone except the aggressor who can still act must act again."""
    players = tuple(
        replace(p, has_acted=False) if i != aggressor and p.can_act else p
        for i, p in enumerate(state.players)
    )
    return replace(state, players=players)
