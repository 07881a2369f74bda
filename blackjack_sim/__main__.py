"""Run a batch of random-play rounds: python -m blackjack_sim"""

import logging
from random import Random

from blackjack_sim.config import AppConfig, config, configure_logging
from blackjack_sim.decisions import RandomDecisions
from blackjack_sim.game.events import EventEmitter
from blackjack_sim.player import Player
from blackjack_sim.simulation import RoundSummary, play_rounds

logger = logging.getLogger("blackjack_sim")


def run(cfg: AppConfig = config) -> list[RoundSummary]:
    """Seat the configured players and play the configured number of rounds."""
    rules = cfg.table.to_rules()
    rng = Random(cfg.seed)
    players = [
        Player(
            wallet=cfg.wallet,
            decisions=RandomDecisions(rng=rng, bet_range=(rules.min_bet, rules.min_bet * 10)),
            rules=rules,
            name=f"player{seat}",
        )
        for seat in range(1, cfg.players + 1)
    ]

    events = EventEmitter()
    events.subscribe(lambda event: logger.debug("%s", event))

    summaries = play_rounds(players, cfg.rounds, rules=rules, rng=rng, events=events)
    for summary in summaries:
        logger.info("Round %d net: %s", summary.number, summary.net)
    for player in players:
        logger.info("%s finished with %d", player.name, player.wallet)
    return summaries


def main() -> None:
    configure_logging()
    run()


if __name__ == "__main__":
    main()
