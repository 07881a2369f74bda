"""Round orchestration and state management."""

from blackjack_sim.game.events import GameEvent, EventEmitter, EventType
from blackjack_sim.game.state import RoundState
from blackjack_sim.game.round import BlackjackRound

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundState",
    "BlackjackRound",
]
