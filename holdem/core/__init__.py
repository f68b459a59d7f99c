"""
Holdem Core - Pure Python No-Limit Texas Hold'em Rules

This module contains all rule logic: cards, dealing, hand ranking, pots and
betting. Every operation takes immutable values and returns new ones.
"""

from holdem.core.card import Card, Hand, Rank, Suit, parse_cards
from holdem.core.deck import Deck, create_deck, deal, remaining, reset, shuffle
from holdem.core.rng import RandomSource, SecureRandom, SeededRandom
from holdem.core.hand import (
    HandCategory, HandEvaluation, compare_hands, evaluate_hand, find_best_hand,
)
from holdem.core.pot import (
    Contribution, Distribution, DistributionResult, Pot, PotError, SidePot, Winner,
    calculate_pot, distribute_pot,
)
from holdem.core.player import Player
from holdem.core.actions import AllIn, Bet, Call, Check, Fold, PlayerAction, Raise
from holdem.core.state import Blinds, GameState
from holdem.core.rules import NO_ACTOR, ActionType, GameStatus
from holdem.core.validator import ValidationResult, validate_action
from holdem.core.betting import (
    ActionResult, apply_action, get_next_actor, is_betting_closed, is_round_complete,
    legal_actions,
)
from holdem.core.table import (
    ShowdownResult, advance_street, new_table, resolve_showdown, run_out_board, start_hand,
)

__all__ = [
    "Card", "Hand", "Rank", "Suit", "parse_cards",
    "Deck", "create_deck", "deal", "remaining", "reset", "shuffle",
    "RandomSource", "SecureRandom", "SeededRandom",
    "HandCategory", "HandEvaluation", "compare_hands", "evaluate_hand", "find_best_hand",
    "Contribution", "Distribution", "DistributionResult", "Pot", "PotError", "SidePot",
    "Winner", "calculate_pot", "distribute_pot",
    "Player",
    "AllIn", "Bet", "Call", "Check", "Fold", "PlayerAction", "Raise",
    "Blinds", "GameState",
    "NO_ACTOR", "ActionType", "GameStatus",
    "ValidationResult", "validate_action",
    "ActionResult", "apply_action", "get_next_actor", "is_betting_closed",
    "is_round_complete", "legal_actions",
    "ShowdownResult", "advance_street", "new_table", "resolve_showdown",
    "run_out_board", "start_hand",
]
