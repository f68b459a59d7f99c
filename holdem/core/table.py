"""
Hand flow around the betting rounds.

The betting reducer only knows about one street. This module moves a hand
through its streets:

    new_table -> start_hand -> (apply_action ...) -> advance_street -> ...
              -> resolve_showdown

Every function takes a snapshot (and the deck, when cards are needed) and
returns new values. The deck is owned by the caller between calls, like the
state.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
from typing import Any, Dict, List, Sequence, Tuple

from holdem.core.card import Hand, format_cards
from holdem.core.deck import Deck, burn, create_deck, deal, shuffle
from holdem.core.errors import IllegalStateTransition, InvalidGameState
from holdem.core.hand import HandEvaluation, find_best_hand
from holdem.core.player import Player
from holdem.core.pot import Distribution, Pot, Winner, calculate_pot, distribute_pot, pot_eligibility
from holdem.core.betting import is_betting_closed
from holdem.core.rng import RandomSource
from holdem.core.rules import (
    BETTING_STREETS, HOLE_CARDS, MIN_PLAYERS, NO_ACTOR, STREET_CARDS, TOTAL_COMMUNITY_CARDS,
    GameStatus, get_blind_positions, next_street,
)
from holdem.core.state import Blinds, GameState, recalculate_pot


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShowdownResult:
    """Who won what at the end of a hand."""
    distributions: Tuple[Distribution, ...]
    winners: Tuple[Winner, ...]
    evaluations: Dict[str, HandEvaluation]

    @property
    def uncontested(self) -> bool:
        """Won without showing cards (everyone else folded)."""
        return not self.evaluations

    def amount_for(self, player_id: str) -> int:
        return sum(d.amount for d in self.distributions if d.player_id == player_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "distributions": [d.to_dict() for d in self.distributions],
            "winners": [
                {"player_id": w.player_id, "pot_index": w.pot_index} for w in self.winners
            ],
            "evaluations": {pid: e.to_dict() for pid, e in self.evaluations.items()},
        }


def new_table(
    player_ids: Sequence[str],
    blinds: Blinds,
    starting_chips: int,
    dealer: int = 0,
) -> GameState:
    """Seat players with equal stacks, waiting for the first hand."""
    if len(player_ids) < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")
    if len(set(player_ids)) != len(player_ids):
        raise ValueError("Player ids must be unique")

    players = tuple(
        Player(id=pid, chips=starting_chips, position=i, name=pid)
        for i, pid in enumerate(player_ids)
    )
    return GameState(
        status=GameStatus.WAITING,
        players=players,
        blinds=blinds,
        dealer=dealer % len(players),
    )


def start_hand(state: GameState, rng: RandomSource) -> Tuple[GameState, Deck]:
    """
    Start a new hand.

    Moves the button (except on the first hand), shuffles a fresh deck with
    the supplied randomness, posts blinds and deals hole cards.

    Returns:
        Tuple of (PREFLOP state, deck after dealing)

    Raises:
        IllegalStateTransition: If a hand is already running or fewer than
            two players have chips.
    """
    if state.status not in (GameStatus.WAITING, GameStatus.COMPLETE):
        raise IllegalStateTransition(f"Cannot start a hand from {state.status.value}")

    players = [p.reset_for_new_hand() for p in state.players]
    active_indices = [i for i, p in enumerate(players) if p.is_active]
    if len(active_indices) < MIN_PLAYERS:
        raise IllegalStateTransition("Cannot start hand: not enough players with chips")

    num_players = len(players)
    if state.hand_number == 0:
        dealer = _next_seat(players, state.dealer - 1)
    else:
        dealer = _next_seat(players, state.dealer)

    hand_number = state.hand_number + 1
    logger.info(f"Starting hand #{hand_number} (dealer seat {dealer})")

    # DEALING: fresh deck, blinds, hole cards
    deck = shuffle(create_deck(), rng)

    sb_rel, bb_rel = get_blind_positions(len(active_indices), active_indices.index(dealer))
    sb_pos, bb_pos = active_indices[sb_rel], active_indices[bb_rel]
    players[sb_pos] = players[sb_pos].commit(state.blinds.small)
    players[bb_pos] = players[bb_pos].commit(state.blinds.big)
    logger.debug(
        f"Blinds posted: SB={players[sb_pos].total_bet} BB={players[bb_pos].total_bet}"
    )

    for offset in range(1, num_players + 1):
        seat = (dealer + offset) % num_players
        if players[seat].is_active:
            deck, cards = deal(deck, HOLE_CARDS)
            players[seat] = replace(players[seat], hand=Hand(tuple(cards)))

    if len(active_indices) == 2:
        # Heads-up: dealer acts first preflop
        first = _first_can_act(players, dealer)
    else:
        first = _first_can_act(players, (bb_pos + 1) % num_players)

    new_state = recalculate_pot(GameState(
        status=GameStatus.PREFLOP,
        players=tuple(players),
        blinds=state.blinds,
        community_cards=(),
        current_bet=state.blinds.big,
        dealer=dealer,
        current_actor=first,
        hand_number=hand_number,
    ))
    if is_betting_closed(new_state):
        new_state = replace(new_state, current_actor=NO_ACTOR)
    return new_state, deck


def advance_street(state: GameState, deck: Deck) -> Tuple[GameState, Deck]:
    """
    Close the current betting street and open the next one.

    Burns a card and deals the flop, turn or river; from the river (or when
    only one player is left) the hand moves to SHOWDOWN.

    Raises:
        IllegalStateTransition: Outside a betting street, or while players
            still have to act.
    """
    if state.status not in BETTING_STREETS:
        raise IllegalStateTransition(f"No betting street to advance from {state.status.value}")
    if not is_betting_closed(state):
        raise IllegalStateTransition("Betting round is not complete")

    if len(state.players_in_hand) <= 1 or state.status == GameStatus.RIVER:
        return replace(state, status=GameStatus.SHOWDOWN, current_actor=NO_ACTOR), deck

    deck = burn(deck)
    deck, cards = deal(deck, STREET_CARDS[state.status])
    status = next_street(state.status)
    players = tuple(p.reset_for_new_round() for p in state.players)
    logger.debug(f"{status.value}: {format_cards(cards)}")

    new_state = replace(
        state,
        status=status,
        players=players,
        community_cards=state.community_cards + tuple(cards),
        current_bet=0,
        current_actor=_first_can_act(players, (state.dealer + 1) % len(players)),
    )
    if is_betting_closed(new_state):
        new_state = replace(new_state, current_actor=NO_ACTOR)
    return new_state, deck


def run_out_board(state: GameState, deck: Deck) -> Tuple[GameState, Deck]:
    """
    Deal the remaining streets when no more betting is possible.

    Raises:
        IllegalStateTransition: If betting is still open on some street.
    """
    while state.status in BETTING_STREETS:
        state, deck = advance_street(state, deck)
    return state, deck


def resolve_showdown(state: GameState) -> Tuple[GameState, ShowdownResult]:
    """
    Award the pot and finish the hand.

    With a single player left the whole pot goes to them uncontested.
    Otherwise each pot goes to the best hand among the players still in it.
    Tied winners are listed clockwise from the dealer, so odd chips go to
    the first of them.

    Raises:
        IllegalStateTransition: If the hand is not at showdown and more than
            one player is still in it, or the board is incomplete.
    """
    in_hand = state.players_in_hand
    uncontested = len(in_hand) == 1
    if state.status != GameStatus.SHOWDOWN and not (uncontested and state.is_betting):
        raise IllegalStateTransition(f"Cannot resolve showdown from {state.status.value}")

    contributions = state.contributions()
    pot = calculate_pot(contributions)
    if pot.total != state.pot.total:
        raise InvalidGameState(
            f"Pot holds {state.pot.total} but players contributed {pot.total}"
        )

    evaluations: Dict[str, HandEvaluation] = {}
    if uncontested:
        winner_id = in_hand[0].id
        winners = [Winner(winner_id, i) for i in range(pot.num_pots)]
    else:
        if len(state.community_cards) != TOTAL_COMMUNITY_CARDS:
            raise IllegalStateTransition("Showdown needs a complete board")
        for player in in_hand:
            evaluations[player.id] = find_best_hand(
                list(player.hand.cards) + list(state.community_cards)
            )
        winners = _pot_winners(state, pot_eligibility(contributions), evaluations)

    result = distribute_pot(pot, winners)
    if not result.success:
        raise InvalidGameState(result.message)

    players = tuple(
        replace(p, chips=p.chips + result.amount_for(p.id)) for p in state.players
    )
    for distribution in result.distributions:
        how = "uncontested" if uncontested else evaluations[distribution.player_id].description
        logger.info(f"Hand #{state.hand_number}: {distribution.player_id} wins ${distribution.amount} ({how})")

    final = replace(
        state,
        status=GameStatus.COMPLETE,
        players=players,
        pot=Pot(),
        current_bet=0,
        current_actor=NO_ACTOR,
    )
    return final, ShowdownResult(result.distributions, tuple(winners), evaluations)


def _pot_winners(
    state: GameState,
    eligibility: List[Tuple[str, ...]],
    evaluations: Dict[str, HandEvaluation],
) -> List[Winner]:
    """Best hands for each pot, in clockwise order from the dealer."""
    num_players = len(state.players)
    clockwise = [
        state.players[(state.dealer + 1 + i) % num_players].id for i in range(num_players)
    ]

    winners: List[Winner] = []
    for index, eligible in enumerate(eligibility):
        contenders = [pid for pid in eligible if pid in evaluations]
        if not contenders:
            # Every contributor to this level folded; it goes to the best live hand
            contenders = list(evaluations)
        best = max(evaluations[pid].value for pid in contenders)
        for pid in clockwise:
            if pid in contenders and evaluations[pid].value == best:
                winners.append(Winner(pid, index))
    return winners


def _next_seat(players: Sequence[Player], after: int) -> int:
    """First seat after `after` whose player is dealt in."""
    num_players = len(players)
    for i in range(1, num_players + 1):
        seat = (after + i) % num_players
        if players[seat].is_active:
            return seat
    return NO_ACTOR


def _first_can_act(players: Sequence[Player], start: int) -> int:
    """First seat at or after `start` whose player can act."""
    num_players = len(players)
    for i in range(num_players):
        seat = (start + i) % num_players
        if players[seat].can_act:
            return seat
    return NO_ACTOR
