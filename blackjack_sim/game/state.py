"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: START → BETTING → DEALING → INSURANCE → PLAYER_TURNS → DEALER_PLAY
    → SETTLEMENT → SETTLED
    """

    # Built, nothing dealt yet
    START = auto()

    # Players place their main wagers
    BETTING = auto()

    # Two cards to each player, then two to the dealer
    DEALING = auto()

    # Side bets offered when the dealer shows an Ace
    INSURANCE = auto()

    # Each player acts in seat order
    PLAYER_TURNS = auto()

    # Dealer plays its own hand
    DEALER_PLAY = auto()

    # Wagers compared and paid
    SETTLEMENT = auto()

    # Terminal: every player settled
    SETTLED = auto()

    # Terminal: the deck ran out, stakes refunded
    ABORTED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

