"""Single-deck blackjack round simulation - 100% UI-agnostic."""

from blackjack_sim.cards import Card, Deck, Rank, Suit, new_deck
from blackjack_sim.dealer import Dealer, DealerActions, Outcome, SettlementResult
from blackjack_sim.decisions import (
    Action,
    DecisionProvider,
    RandomDecisions,
    ScriptedDecisions,
)
from blackjack_sim.exceptions import (
    BlackjackError,
    DeckExhaustedError,
    EmptyOperationError,
    IllegalActionError,
    InsufficientFundsError,
)
from blackjack_sim.hand import Hand, evaluate_hands, is_blackjack, score
from blackjack_sim.player import Player
from blackjack_sim.rules import TableRules

__all__ = [
    "Action",
    "BlackjackError",
    "Card",
    "Dealer",
    "DealerActions",
    "DecisionProvider",
    "Deck",
    "DeckExhaustedError",
    "EmptyOperationError",
    "Hand",
    "IllegalActionError",
    "InsufficientFundsError",
    "Outcome",
    "Player",
    "RandomDecisions",
    "Rank",
    "ScriptedDecisions",
    "SettlementResult",
    "Suit",
    "TableRules",
    "evaluate_hands",
    "is_blackjack",
    "new_deck",
    "score",
]
