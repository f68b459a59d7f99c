"""
Pydantic schemas for the serialized engine values.

Game states, actions and decks cross into the engine as plain data from
whatever layer stores or transmits them. These schemas check that data
before it is turned back into engine values.
"""

import re
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from holdem.core.actions import PlayerAction, action_from_dict
from holdem.core.deck import Deck
from holdem.core.errors import InvalidGameState
from holdem.core.rules import DECK_SIZE, TOTAL_COMMUNITY_CARDS
from holdem.core.state import GameState


CARD_PATTERN = re.compile(r"^[2-9TJQKA][hdcs]$")

StatusLiteral = Literal[
    "WAITING", "DEALING", "PREFLOP", "FLOP", "TURN", "RIVER", "SHOWDOWN", "COMPLETE",
]

ActionLiteral = Literal["FOLD", "CHECK", "CALL", "BET", "RAISE", "ALL_IN"]


class _Schema(BaseModel):
    model_config = ConfigDict(strict=True)


class PlayerSchema(_Schema):
    """Serialized player."""
    id: str
    name: str = ""
    chips: int = Field(ge=0)
    bet_this_round: int = Field(ge=0, default=0)
    total_bet: int = Field(ge=0, default=0)
    hand: Optional[List[str]] = Field(default=None, min_length=2, max_length=2)
    is_active: bool = True
    has_folded: bool = False
    is_all_in: bool = False
    position: int = Field(ge=0, default=0)
    has_acted: bool = False

    @model_validator(mode="after")
    def check_cards(self) -> "PlayerSchema":
        if self.hand is not None:
            _check_cards(self.hand)
        return self


class SidePotSchema(_Schema):
    """Serialized side pot."""
    amount: int = Field(ge=0)
    eligible_players: List[str]


class PotSchema(_Schema):
    """Serialized pot."""
    main: int = Field(ge=0)
    side: List[SidePotSchema] = []


class BlindsSchema(_Schema):
    """Serialized blind sizes."""
    small: int = Field(ge=0)
    big: int = Field(ge=0)


class GameStateSchema(_Schema):
    """Complete serialized game state."""
    status: StatusLiteral
    players: List[PlayerSchema]
    pot: PotSchema
    community_cards: List[str] = Field(max_length=TOTAL_COMMUNITY_CARDS)
    current_bet: int = Field(ge=0)
    dealer: int
    current_actor: int
    hand_number: int = Field(ge=0)
    blinds: BlindsSchema

    @model_validator(mode="after")
    def check_cards(self) -> "GameStateSchema":
        _check_cards(self.community_cards)
        return self


class ActionSchema(_Schema):
    """Serialized player action."""
    type: ActionLiteral
    amount: int = Field(ge=0, default=0)


class DeckSchema(_Schema):
    """Serialized deck."""
    cards: List[str] = Field(max_length=DECK_SIZE)
    dealt_index: int = Field(ge=0, default=0)

    @model_validator(mode="after")
    def check_deck(self) -> "DeckSchema":
        _check_cards(self.cards)
        if len(set(self.cards)) != len(self.cards):
            raise ValueError("Deck contains duplicate cards")
        if self.dealt_index > len(self.cards):
            raise ValueError("dealt_index is past the end of the deck")
        return self


def _check_cards(cards: List[str]) -> None:
    for card in cards:
        if not CARD_PATTERN.match(card):
            raise ValueError(f"Invalid card: {card!r}")


def is_valid_game_state(data: Any) -> bool:
    """
    Check serialized state before trusting it.

    Required fields must be present with the right types, the status must be
    one of the eight known values and pot, bet and blind fields must not be
    negative.
    """
    try:
        GameStateSchema.model_validate(data)
    except ValidationError:
        return False
    return True


def load_game_state(data: Dict[str, Any]) -> GameState:
    """
    Validate and build a game state.

    Raises:
        InvalidGameState: If the data fails validation.
    """
    try:
        schema = GameStateSchema.model_validate(data)
        return GameState.from_dict(schema.model_dump())
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError too
        raise InvalidGameState(str(exc)) from exc


def dump_game_state(state: GameState, hide_cards: bool = False) -> Dict[str, Any]:
    return state.to_dict(hide_cards=hide_cards)


def load_action(data: Dict[str, Any]) -> PlayerAction:
    """Validate and build a player action."""
    schema = ActionSchema.model_validate(data)
    return action_from_dict(schema.model_dump())


def load_deck(data: Dict[str, Any]) -> Deck:
    """Validate and build a deck."""
    schema = DeckSchema.model_validate(data)
    return Deck.from_dict(schema.model_dump())
