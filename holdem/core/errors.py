"""
Exceptions raised for contract violations.

Rule violations made by players (acting out of turn, raising too little, ...)
are never raised; they come back as result objects from the validator, the
betting reducer and the pot distributor. The exceptions here signal caller
misuse: malformed input or an impossible request.
"""


class HoldemError(ValueError):
    """Base class for all engine errors."""


class InvalidCardFormat(HoldemError):
    """Card text is not exactly a rank character followed by a suit character."""


class InvalidHand(HoldemError):
    """Hole cards are not exactly two distinct cards."""


class InsufficientCards(HoldemError):
    """Fewer cards are available than the operation needs."""


class NegativeCount(HoldemError):
    """A negative number of cards was requested."""


class InvalidGameState(HoldemError):
    """Serialized game state failed validation."""


class IllegalStateTransition(HoldemError):
    """A street or showdown transition was requested out of order."""
