"""Blackjack round errors.

Deck exhaustion is fatal to a round and propagates to the caller. Funds and
action errors are recoverable: the round catches them and falls back to the
nearest legal behaviour.
"""

from typing import Any


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class DeckExhaustedError(BlackjackError):
    """Raised when drawing from an empty deck."""


class EmptyOperationError(BlackjackError):
    """Raised when an operation is meaningless in the deck's current state."""


class InsufficientFundsError(BlackjackError):
    """Raised when a wager exceeds the player's wallet."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Wager of {required} exceeds wallet of {available}")
        self.required = required
        self.available = available


class IllegalActionError(BlackjackError):
    """Raised when a decision-provider returns an action not valid right now."""

    def __init__(self, action: Any, reason: str) -> None:
        super().__init__(f"Illegal action {action!r}: {reason}")
        self.action = action
        self.reason = reason
