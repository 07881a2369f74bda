"""Dealer: deck owner, card dealer and settler of wagers."""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from random import Random
from typing import Protocol, runtime_checkable

from blackjack_sim.cards import Card, Deck
from blackjack_sim.hand import Hand, evaluate_hands
from blackjack_sim.player import Player
from blackjack_sim.rules import TableRules

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of a player's main wager."""

    BLACKJACK = auto()
    WIN = auto()
    PUSH = auto()
    LOSE = auto()
    BUST = auto()

    @property
    def is_win(self) -> bool:
        return self in (Outcome.BLACKJACK, Outcome.WIN)


@dataclass(frozen=True)
class SettlementResult:
    """What one player received at settlement."""

    player: str
    outcome: Outcome
    bet: int
    payout: int
    insurance: int = 0
    insurance_payout: int = 0

    @property
    def total_payout(self) -> int:
        """Return everything credited to the wallet."""
        return self.payout + self.insurance_payout

    @property
    def net(self) -> int:
        """Return the player's gain or loss across both wagers."""
        return self.total_payout - self.bet - self.insurance


class HasHand(Protocol):
    """Anything with a hand a dealer can deal into."""

    hand: Hand


@runtime_checkable
class DealerActions(Protocol):
    """Dealer capability the round orchestrator drives."""

    @property
    def hand(self) -> Hand: ...

    @property
    def deck(self) -> Deck: ...

    def deal_card(self, target: HasHand) -> Card: ...

    def is_insurance_available(self) -> bool: ...

    def play_hand(self) -> list[Card]: ...

    def compare_hand_and_settle(self, player: Player) -> SettlementResult: ...


class Dealer:
    """
    The house seat.

    Owns the deck outright for the round and is the only thing that draws.
    """

    def __init__(
        self,
        deck: Deck | None = None,
        rules: TableRules | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a dealer.

        Args:
            deck: Deck to deal from (a new ordered 52-card deck if omitted)
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for the default deck's shuffle
        """
        self.rules = rules or TableRules()
        self._deck = deck if deck is not None else Deck(rng=rng)
        self._hand = Hand()

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def hand(self) -> Hand:
        return self._hand

    def get_deck(self) -> Deck:
        return self._deck

    def get_hand(self) -> Hand:
        return self._hand

    def shuffle_deck(self) -> None:
        """Shuffle the deck before the round starts."""
        self._deck.shuffle()

    def clear_hand(self) -> None:
        self._hand.clear()

    def deal_card(self, target: HasHand) -> Card:
        """
        Draw the top card and append it to the target's hand.

        Raises:
            DeckExhaustedError: The deck is empty
        """
        card = self._deck.draw()
        target.hand.add_card(card)
        logger.debug(
            "Dealt %s to %s (%d left)",
            card,
            "dealer" if target is self else getattr(target, "name", target),
            len(self._deck),
        )
        return card

    def is_insurance_available(self) -> bool:
        """Check whether the visible (first) card is an Ace."""
        up_card = self._hand.up_card
        return up_card is not None and up_card.is_ace

    def play_hand(self) -> list[Card]:
        """
        Play out the dealer's own hand.

        Under the default rule the dealer stands on its two initial cards.
        With dealer_draws the dealer hits until 17 (or soft 17 when
        dealer_hits_soft_17 is set).

        Returns:
            Cards drawn by the dealer
        """
        drawn: list[Card] = []
        if not self.rules.dealer_draws:
            return drawn

        while self._should_hit():
            drawn.append(self.deal_card(self))
        return drawn

    def _should_hit(self) -> bool:
        value = self._hand.value
        if value < 17:
            return True
        if value == 17 and self._hand.is_soft and self.rules.dealer_hits_soft_17:
            return True
        return False

    def compare_hand_and_settle(self, player: Player) -> SettlementResult:
        """
        Settle one player's wagers against the dealer's final hand.

        Stakes were already taken from the wallet when placed, so a loss
        changes nothing; wins and pushes credit the stake back with any
        winnings. Insurance is settled independently of the main hand.
        Both wagers are reset afterwards; the hand is left for the round
        to clear.
        """
        bet = player.current_bet
        insurance = player.current_insurance
        player_hand = player.hand
        dealer_blackjack = self._hand.is_blackjack

        if player_hand.is_busted:
            outcome = Outcome.BUST
            payout = 0
        else:
            comparison = evaluate_hands(player_hand, self._hand)
            if comparison > 0 and player_hand.is_blackjack and not dealer_blackjack:
                outcome = Outcome.BLACKJACK
                bonus = math.floor(bet * Decimal(str(self.rules.blackjack_payout)))
                payout = bet + bonus
            elif comparison > 0:
                outcome = Outcome.WIN
                payout = 2 * bet
            elif comparison == 0:
                outcome = Outcome.PUSH
                payout = bet
            else:
                outcome = Outcome.LOSE
                payout = 0

        insurance_payout = 0
        if insurance and dealer_blackjack:
            insurance_payout = insurance * (self.rules.insurance_payout + 1)

        player.receive_payout(payout + insurance_payout)
        player.reset_bets()

        result = SettlementResult(
            player=player.name,
            outcome=outcome,
            bet=bet,
            payout=payout,
            insurance=insurance,
            insurance_payout=insurance_payout,
        )
        logger.debug(
            "Settled %s: %s %s vs %s, net %+d",
            player.name,
            outcome.name,
            player_hand.value,
            self._hand.value,
            result.net,
        )
        return result
