"""Multi-round driver: a fresh shuffled dealer for every round."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Sequence

from blackjack_sim.dealer import Dealer, SettlementResult
from blackjack_sim.game.events import EventEmitter
from blackjack_sim.game.round import BlackjackRound
from blackjack_sim.player import Player
from blackjack_sim.rules import TableRules

logger = logging.getLogger(__name__)


@dataclass
class RoundSummary:
    """Outcome of one simulated round."""

    number: int
    wallets_before: dict[str, int]
    wallets_after: dict[str, int]
    results: list[SettlementResult] = field(default_factory=list)
    cards_remaining: int = 0

    @property
    def net(self) -> dict[str, int]:
        """Return each player's wallet change over the round."""
        return {
            name: self.wallets_after[name] - before
            for name, before in self.wallets_before.items()
        }


def play_rounds(
    players: Sequence[Player],
    num_rounds: int,
    rules: TableRules | None = None,
    rng: Random | None = None,
    events: EventEmitter | None = None,
) -> list[RoundSummary]:
    """
    Play consecutive rounds with the same players.

    Each round gets its own dealer and freshly shuffled deck, so no mutable
    state is shared between rounds except the players' wallets.

    Args:
        players: Players in seat order
        num_rounds: Maximum number of rounds to play
        rules: Table rules (uses defaults if not provided)
        rng: Random number generator for reproducible shuffles
        events: Emitter shared by every round

    Returns:
        One summary per round played. Stops early once no player can
        cover the table minimum.
    """
    if num_rounds < 0:
        raise ValueError("num_rounds must not be negative")

    rules = rules or TableRules()
    rng = rng or Random()
    summaries: list[RoundSummary] = []

    for number in range(1, num_rounds + 1):
        if all(player.wallet < rules.min_bet for player in players):
            logger.info("All players below the table minimum after %d round(s)", number - 1)
            break

        dealer = Dealer(rules=rules, rng=rng)
        dealer.shuffle_deck()

        wallets_before = {player.name: player.wallet for player in players}
        game_round = BlackjackRound(dealer, players, rules=rules, events=events)
        game_round.play_round()

        summaries.append(
            RoundSummary(
                number=number,
                wallets_before=wallets_before,
                wallets_after={player.name: player.wallet for player in players},
                results=game_round.results,
                cards_remaining=len(dealer.deck),
            )
        )

    return summaries
