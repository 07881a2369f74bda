"""Pytest fixtures for blackjack round tests."""

import pytest
from random import Random

from blackjack_sim.cards import Card, Deck
from blackjack_sim.dealer import Dealer
from blackjack_sim.decisions import ScriptedDecisions
from blackjack_sim.hand import Hand
from blackjack_sim.player import Player
from blackjack_sim.rules import TableRules


def full_deck_with_top(*codes: str) -> Deck:
    """A standard 52-card deck with the given cards moved to the top, in order."""
    top = [Card.from_string(code) for code in codes]
    rest = [card for card in Deck() if card not in top]
    return Deck(cards=top + rest)


def hand_of(*codes: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def rules():
    """Default table rules."""
    return TableRules()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand_of("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return hand_of("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return hand_of("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return hand_of("10S", "6H", "KC")


@pytest.fixture
def make_player(rules):
    """Factory for players driven by a scripted action queue."""

    def _make(
        actions=(),
        wallet=100,
        bet=10,
        insurance=0,
        name="player",
        table_rules=None,
    ) -> Player:
        return Player(
            wallet=wallet,
            decisions=ScriptedDecisions(actions, bet=bet, insurance=insurance),
            rules=table_rules or rules,
            name=name,
        )

    return _make


@pytest.fixture
def stacked_dealer(rules):
    """Factory for a dealer whose deck has the given cards on top."""

    def _make(*codes: str, table_rules=None) -> Dealer:
        return Dealer(deck=full_deck_with_top(*codes), rules=table_rules or rules)

    return _make


@pytest.fixture
def build_hand():
    """Factory for hands built from card strings."""
    return hand_of


@pytest.fixture
def build_deck():
    """Factory for full decks with chosen cards on top."""
    return full_deck_with_top
