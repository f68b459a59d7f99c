"""
Holdem - No-Limit Texas Hold'em Rules Engine

A standalone rules engine for a single hand of Texas Hold'em:
- Cards, seeded or secure shuffling and dealing
- Hand ranking and best-5-of-7 search
- Main pot and side pot construction and payout
- Betting state machine with action validation

Usage:
    from holdem import TableConfig, SecureRandom, start_hand, apply_action, Call
"""

__version__ = "0.2.0"

from holdem.core.card import Card, Hand
from holdem.core.deck import Deck, create_deck
from holdem.core.rng import SecureRandom, SeededRandom
from holdem.core.hand import HandCategory, HandEvaluation, find_best_hand
from holdem.core.pot import Pot, calculate_pot, distribute_pot
from holdem.core.player import Player
from holdem.core.actions import AllIn, Bet, Call, Check, Fold, Raise
from holdem.core.state import GameState
from holdem.core.rules import GameStatus
from holdem.core.validator import validate_action
from holdem.core.betting import apply_action
from holdem.core.table import advance_street, resolve_showdown, start_hand
from holdem.config import TableConfig
from holdem.schemas import is_valid_game_state, load_game_state

__all__ = [
    "Card",
    "Hand",
    "Deck",
    "create_deck",
    "SecureRandom",
    "SeededRandom",
    "HandCategory",
    "HandEvaluation",
    "find_best_hand",
    "Pot",
    "calculate_pot",
    "distribute_pot",
    "Player",
    "AllIn",
    "Bet",
    "Call",
    "Check",
    "Fold",
    "Raise",
    "GameState",
    "GameStatus",
    "validate_action",
    "apply_action",
    "advance_street",
    "resolve_showdown",
    "start_hand",
    "TableConfig",
    "is_valid_game_state",
    "load_game_state",
    "__version__",
]
