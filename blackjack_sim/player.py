"""Player state: wallet, wagers, hand and bound decision-provider."""

import logging

from blackjack_sim.decisions import Action, DecisionProvider, ScriptedDecisions
from blackjack_sim.exceptions import IllegalActionError, InsufficientFundsError
from blackjack_sim.hand import Hand
from blackjack_sim.rules import TableRules

logger = logging.getLogger(__name__)


class Player:
    """
    A seat at the table.

    The wallet only changes through this class's own methods.
    """

    def __init__(
        self,
        wallet: int = 1000,
        decisions: DecisionProvider | None = None,
        rules: TableRules | None = None,
        name: str = "player",
    ) -> None:
        """
        Initialize a player.

        Args:
            wallet: Starting balance in whole currency units
            decisions: Provider for bets, insurance and actions
                (defaults to one that bets the minimum and always stands)
            rules: Table rules (uses defaults if not provided)
            name: Label used in events and logs
        """
        if wallet < 0:
            raise ValueError("wallet must not be negative")

        self.rules = rules or TableRules()
        self.decisions = decisions or ScriptedDecisions(bet=self.rules.min_bet)
        self.name = name
        self.wallet = wallet
        self.current_bet = 0
        self.current_insurance = 0
        self.hand = Hand()

    def __repr__(self) -> str:
        return (
            f"Player({self.name!r}, wallet={self.wallet}, "
            f"bet={self.current_bet}, insurance={self.current_insurance})"
        )

    def get_hand(self) -> Hand:
        return self.hand

    def _move_to_stake(self, amount: int) -> None:
        if amount > self.wallet:
            raise InsufficientFundsError(required=amount, available=self.wallet)
        self.wallet -= amount

    def make_bet(self, amount: int | None = None) -> int:
        """
        Place the round's main wager.

        A wallet below the table minimum places no bet. Otherwise the
        requested amount is raised to the minimum and capped at the table
        maximum before being moved out of the wallet.

        Args:
            amount: Wager to place (asks the decision-provider if omitted)

        Returns:
            The amount now riding on the hand

        Raises:
            InsufficientFundsError: The wager exceeds the wallet
            IllegalActionError: A bet was already placed this round
        """
        if self.current_bet:
            raise IllegalActionError("bet", "a bet is already placed this round")

        if self.wallet < self.rules.min_bet:
            logger.debug("%s sits out: wallet %d below minimum", self.name, self.wallet)
            return 0

        if amount is None:
            amount = self.decisions.choose_bet()
        amount = max(amount, self.rules.min_bet)
        if self.rules.max_bet is not None:
            amount = min(amount, self.rules.max_bet)

        self._move_to_stake(amount)
        self.current_bet = amount
        return amount

    def make_insurance_bet(self) -> int:
        """
        Place an insurance side bet of up to half the main wager.

        Requests beyond half the bet or beyond the wallet are reduced to the
        largest legal stake.

        Returns:
            The insurance stake placed (may be 0)
        """
        requested = self.decisions.choose_insurance()
        limit = min(self.current_bet // 2, self.wallet)
        amount = max(0, min(requested, limit))
        if amount != requested:
            logger.debug(
                "%s insurance request %d reduced to %d", self.name, requested, amount
            )

        self._move_to_stake(amount)
        self.current_insurance += amount
        return amount

    def double_down_bet(self) -> int:
        """
        Double the main wager.

        Returns:
            The new total wager

        Raises:
            InsufficientFundsError: The wallet cannot match the current bet
        """
        self._move_to_stake(self.current_bet)
        self.current_bet *= 2
        return self.current_bet

    def get_action(self) -> Action:
        """Return the provider's next action."""
        return self.decisions.next_action()

    def receive_payout(self, amount: int) -> None:
        """Credit a settlement payout (stake plus winnings) to the wallet."""
        if amount < 0:
            raise ValueError("payout must not be negative")
        self.wallet += amount

    def reset_bets(self) -> None:
        """Clear wagers once they have been settled."""
        self.current_bet = 0
        self.current_insurance = 0

    def refund_bets(self) -> int:
        """Return unsettled wagers to the wallet, e.g. when a round aborts."""
        refund = self.current_bet + self.current_insurance
        self.wallet += refund
        self.reset_bets()
        return refund

    def clear_hand(self) -> None:
        """Discard the hand between rounds."""
        self.hand.clear()
