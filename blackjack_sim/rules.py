"""Table rules for a single-deck round."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TableRules:
    """
    Blackjack table rules configuration.

    The defaults describe the minimal table: the dealer keeps its two initial
    cards, doubling is only allowed as the first action, blackjack pays 3:2 and
    insurance pays 2:1.
    """

    # Betting limits
    min_bet: int = 10
    max_bet: int | None = None

    # Blackjack payout (3:2 = 1.5)
    blackjack_payout: float = 1.5

    # Insurance pays 2:1
    insurance_payout: int = 2

    # Dealer rules
    dealer_draws: bool = False  # Draw to 17 instead of standing on two cards
    dealer_hits_soft_17: bool = False  # Only meaningful with dealer_draws

    # Double down rules
    double_after_hit: bool = False

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if self.max_bet is not None and self.max_bet < self.min_bet:
            raise ValueError("max_bet must not be below min_bet")
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")
        if self.insurance_payout < 1:
            raise ValueError("insurance_payout must be at least 1")

    @classmethod
    def standard(cls) -> "TableRules":
        """Minimal table: dealer stands on its first two cards."""
        return cls()

    @classmethod
    def dealer_draws_to_17(cls, hits_soft_17: bool = False) -> "TableRules":
        """Full table realism: dealer draws until reaching 17."""
        return cls(dealer_draws=True, dealer_hits_soft_17=hits_soft_17)
