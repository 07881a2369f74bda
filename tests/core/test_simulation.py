"""Tests for the multi-round driver."""

import pytest
from random import Random

from blackjack_sim.decisions import Action, RandomDecisions
from blackjack_sim.game import EventEmitter, EventType
from blackjack_sim.player import Player
from blackjack_sim.simulation import play_rounds


def _random_players(count, wallet=1000, seed=0):
    rng = Random(seed)
    return [
        Player(wallet=wallet, decisions=RandomDecisions(rng=rng), name=f"p{i}")
        for i in range(count)
    ]


class TestPlayRounds:
    """Tests for play_rounds."""

    def test_plays_requested_rounds(self):
        players = _random_players(3)
        summaries = play_rounds(players, 20, rng=Random(1))

        assert [s.number for s in summaries] == list(range(1, len(summaries) + 1))
        assert 0 < len(summaries) <= 20

    def test_wallets_chain_between_rounds(self):
        players = _random_players(2)
        summaries = play_rounds(players, 10, rng=Random(2))

        for previous, current in zip(summaries, summaries[1:]):
            assert current.wallets_before == previous.wallets_after
        assert summaries[-1].wallets_after == {p.name: p.wallet for p in players}

    def test_net_matches_results(self):
        players = _random_players(2)
        summaries = play_rounds(players, 10, rng=Random(3))

        for summary in summaries:
            by_player = {result.player: result.net for result in summary.results}
            assert summary.net == by_player

    def test_every_round_uses_a_fresh_deck(self):
        players = _random_players(4)
        summaries = play_rounds(players, 15, rng=Random(4))

        for summary in summaries:
            # Four players and the dealer hold at least two cards each
            assert 0 <= summary.cards_remaining <= 52 - 5 * 2

    def test_wallets_never_negative(self):
        players = _random_players(3, wallet=50)
        for summary in play_rounds(players, 50, rng=Random(5)):
            assert all(wallet >= 0 for wallet in summary.wallets_after.values())

    def test_stops_when_everyone_is_broke(self):
        players = [Player(wallet=5, name="broke")]
        assert play_rounds(players, 10) == []

    def test_zero_rounds(self):
        assert play_rounds(_random_players(1), 0) == []

    def test_negative_rounds_rejected(self):
        with pytest.raises(ValueError):
            play_rounds(_random_players(1), -1)

    def test_shared_event_emitter(self):
        events = EventEmitter()
        play_rounds(_random_players(1), 3, rng=Random(6), events=events)
        assert len(events.of_type(EventType.ROUND_ENDED)) == 3

    def test_stand_only_player_keeps_two_cards(self):
        player = Player(wallet=100, name="stander")
        summaries = play_rounds([player], 1, rng=Random(7))

        assert summaries[0].cards_remaining == 48
        assert len(player.hand) == 2
        assert player.get_action() is Action.STAND
