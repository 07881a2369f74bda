"""Round orchestrator: sequences one full round across all players."""

import logging
from typing import Sequence

from transitions import Machine

from blackjack_sim.cards import Card
from blackjack_sim.dealer import DealerActions, HasHand, Outcome, SettlementResult
from blackjack_sim.decisions import Action
from blackjack_sim.exceptions import (
    DeckExhaustedError,
    IllegalActionError,
    InsufficientFundsError,
)
from blackjack_sim.game.events import EventEmitter, EventType
from blackjack_sim.game.state import RoundState
from blackjack_sim.player import Player
from blackjack_sim.rules import TableRules

logger = logging.getLogger(__name__)


class BlackjackRound:
    """
    One dealt round of blackjack, driven by a state machine.

    The round holds references to one dealer and an ordered list of players
    and performs every state transition itself. Wallets are only touched
    through the players' own methods; cards only move through the dealer.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "open_betting", "source": "start", "dest": "betting"},
        {"trigger": "begin_deal", "source": "betting", "dest": "dealing"},
        {"trigger": "offer_insurance", "source": "dealing", "dest": "insurance"},
        {"trigger": "begin_turns", "source": "insurance", "dest": "player_turns"},
        {"trigger": "dealer_turn", "source": "player_turns", "dest": "dealer_play"},
        {"trigger": "begin_settlement", "source": "dealer_play", "dest": "settlement"},
        {"trigger": "finish", "source": "settlement", "dest": "settled"},
        {
            "trigger": "abort",
            "source": ["dealing", "player_turns", "dealer_play"],
            "dest": "aborted",
        },
    ]

    def __init__(
        self,
        dealer: DealerActions,
        players: Sequence[Player],
        rules: TableRules | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Build a round.

        Args:
            dealer: Dealer that owns the deck and settles wagers
            players: Players in seat order
            rules: Table rules (falls back to the dealer's, then the defaults)
            events: Emitter to publish round events on
        """
        if not players:
            raise ValueError("A round needs at least one player")

        self.dealer = dealer
        self.players = list(players)
        self.rules = rules or getattr(dealer, "rules", None) or TableRules()
        self.events = events or EventEmitter()
        self.results: list[SettlementResult] = []

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="start",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def play_round(self) -> None:
        """
        Run every phase, in order, until the round is settled.

        Raises:
            DeckExhaustedError: The deck ran out; stakes were refunded and
                nobody was settled
            MachineError: The round has already been played
        """
        self.open_betting()
        self.events.emit_new(EventType.ROUND_STARTED, players=len(self.players))
        logger.info("Round started with %d player(s)", len(self.players))

        for player in self.players:
            player.hand.clear()
        self.dealer.hand.clear()
        self._take_bets()

        try:
            self.begin_deal()
            self._deal_initial_cards()

            self.offer_insurance()
            self._offer_insurance()

            self.begin_turns()
            for player in self.players:
                self._play_turn(player)

            self.dealer_turn()
            self._play_dealer()
        except DeckExhaustedError:
            self._abort_round()
            raise

        self.begin_settlement()
        self._settle()
        self.finish()

    def _take_bets(self) -> None:
        for player in self.players:
            try:
                amount = player.make_bet()
            except InsufficientFundsError as exc:
                logger.warning("%s: %s; betting whole wallet", player.name, exc)
                self.events.emit_new(
                    EventType.INSUFFICIENT_FUNDS,
                    player=player.name,
                    required=exc.required,
                    available=exc.available,
                )
                amount = player.make_bet(player.wallet)
            except IllegalActionError as exc:
                logger.warning("%s: %s; keeping the stake already placed", player.name, exc)
                self.events.emit_new(
                    EventType.INVALID_ACTION, player=player.name, message=str(exc)
                )
                amount = player.current_bet

            if amount:
                self.events.emit_new(EventType.BET_PLACED, player=player.name, amount=amount)
            else:
                self.events.emit_new(EventType.BET_SKIPPED, player=player.name)

    def _deal(self, target: HasHand) -> Card:
        card = self.dealer.deal_card(target)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer" if target is self.dealer else getattr(target, "name", "player"),
        )
        return card

    def _deal_initial_cards(self) -> None:
        """Two cards to each player in seat order, then two to the dealer."""
        for player in self.players:
            self._deal(player)
            self._deal(player)
        self._deal(self.dealer)
        self._deal(self.dealer)

        for player in self.players:
            if player.hand.is_blackjack:
                self.events.emit_new(EventType.PLAYER_BLACKJACK, player=player.name)

    def _offer_insurance(self) -> None:
        """Every player is offered insurance before anyone acts."""
        if not self.dealer.is_insurance_available():
            return

        self.events.emit_new(EventType.INSURANCE_OFFERED)
        for player in self.players:
            amount = player.make_insurance_bet()
            if amount:
                self.events.emit_new(
                    EventType.INSURANCE_TAKEN, player=player.name, amount=amount
                )
            else:
                self.events.emit_new(EventType.INSURANCE_DECLINED, player=player.name)

    def _check_action(self, player: Player, action: object, actions_taken: int) -> None:
        if not isinstance(action, Action):
            raise IllegalActionError(action, "not a player action")
        if action is Action.DOUBLE and not player.current_bet:
            raise IllegalActionError(action, "no bet to double")
        if action is Action.DOUBLE and actions_taken and not self.rules.double_after_hit:
            raise IllegalActionError(action, "double is only allowed as the first action")

    def _play_turn(self, player: Player) -> None:
        """Ask for actions until the player stands, doubles or busts."""
        actions_taken = 0
        while True:
            action = player.get_action()
            try:
                self._check_action(player, action, actions_taken)
            except IllegalActionError as exc:
                logger.warning("%s: %s; standing instead", player.name, exc)
                self.events.emit_new(
                    EventType.INVALID_ACTION, player=player.name, message=str(exc)
                )
                action = Action.STAND
            actions_taken += 1

            if action is Action.HIT:
                self._deal(player)
                self.events.emit_new(
                    EventType.PLAYER_HIT, player=player.name, hand_value=player.hand.value
                )
                if player.hand.is_busted:
                    self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name)
                    return
                continue

            if action is Action.DOUBLE:
                try:
                    new_bet = player.double_down_bet()
                except InsufficientFundsError as exc:
                    logger.warning("%s: %s; standing instead", player.name, exc)
                    self.events.emit_new(
                        EventType.INSUFFICIENT_FUNDS,
                        player=player.name,
                        required=exc.required,
                        available=exc.available,
                    )
                    self.events.emit_new(EventType.PLAYER_STAND, player=player.name)
                    return

                self._deal(player)
                self.events.emit_new(
                    EventType.PLAYER_DOUBLE,
                    player=player.name,
                    hand_value=player.hand.value,
                    new_bet=new_bet,
                )
                if player.hand.is_busted:
                    self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name)
                return

            self.events.emit_new(
                EventType.PLAYER_STAND, player=player.name, hand_value=player.hand.value
            )
            return

    def _play_dealer(self) -> None:
        for card in self.dealer.play_hand():
            self.events.emit_new(EventType.DEALER_HITS, card=str(card))

        hand = self.dealer.hand
        if hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=hand.value)
        if hand.is_blackjack:
            self.events.emit_new(EventType.DEALER_BLACKJACK)

    def _settle(self) -> None:
        for player in self.players:
            result = self.dealer.compare_hand_and_settle(player)
            self.results.append(result)
            self._emit_settlement(result)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            wallets={player.name: player.wallet for player in self.players},
        )
        logger.info(
            "Round settled: %s",
            ", ".join(f"{p.name}={p.wallet}" for p in self.players),
        )

    def _emit_settlement(self, result: SettlementResult) -> None:
        if result.outcome.is_win:
            event_type = EventType.PLAYER_WINS
        elif result.outcome == Outcome.PUSH:
            event_type = EventType.PUSH
        else:
            event_type = EventType.PLAYER_LOSES
        self.events.emit_new(
            event_type,
            player=result.player,
            outcome=result.outcome.name,
            payout=result.payout,
        )

        if result.insurance_payout:
            self.events.emit_new(
                EventType.INSURANCE_WINS,
                player=result.player,
                amount=result.insurance_payout,
            )
        elif result.insurance:
            self.events.emit_new(
                EventType.INSURANCE_LOSES,
                player=result.player,
                amount=result.insurance,
            )

    def _abort_round(self) -> None:
        """Refund every stake; nobody is settled."""
        self.abort()
        refunds = {player.name: player.refund_bets() for player in self.players}
        self.events.emit_new(EventType.ROUND_ABORTED, refunds=refunds)
        logger.error("Deck exhausted, round aborted; stakes refunded: %s", refunds)
