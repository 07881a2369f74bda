"""Player actions and the decision-providers that choose them."""

from collections import deque
from enum import Enum, auto
from random import Random
from typing import Iterable, Protocol, runtime_checkable


class Action(Enum):
    """Actions a player can take on their turn."""

    HIT = auto()
    STAND = auto()
    DOUBLE = auto()

    def __str__(self) -> str:
        return self.name.title()


@runtime_checkable
class DecisionProvider(Protocol):
    """
    Source of every decision a player makes.

    Any object with these three methods can drive a Player: scripted test
    doubles, random simulators or an interactive front end.
    """

    def choose_bet(self) -> int:
        """Return the wager for the coming round."""
        ...

    def choose_insurance(self) -> int:
        """Return the insurance stake when the dealer shows an Ace."""
        ...

    def next_action(self) -> Action:
        """Return the next action for the current turn."""
        ...


class ScriptedDecisions:
    """
    Decision-provider backed by an explicit, finite action queue.

    Each call to next_action consumes one queued action. Once the queue is
    empty the provider answers STAND.
    """

    def __init__(
        self,
        actions: Iterable[Action] = (),
        bet: int = 10,
        insurance: int = 0,
    ) -> None:
        self.bet = bet
        self.insurance = insurance
        self._queue: deque[Action] = deque()
        self.taken: list[Action] = []
        self.set_actions(actions)

    def set_actions(self, actions: Iterable[Action]) -> None:
        """Replace the queued actions and forget what was taken."""
        self._queue = deque(actions)
        self.taken = []

    @property
    def remaining(self) -> list[Action]:
        """Return the actions not yet consumed."""
        return list(self._queue)

    def choose_bet(self) -> int:
        return self.bet

    def choose_insurance(self) -> int:
        return self.insurance

    def next_action(self) -> Action:
        if not self._queue:
            return Action.STAND
        action = self._queue.popleft()
        self.taken.append(action)
        return action


class RandomDecisions:
    """
    Decision-provider that plays at random.

    Every action is picked uniformly. Bets are drawn uniformly from bet_range
    and insurance, when taken, is the full half-bet.
    """

    def __init__(
        self,
        rng: Random | None = None,
        bet_range: tuple[int, int] = (10, 100),
        insurance_rate: float = 0.5,
    ) -> None:
        low, high = bet_range
        if low < 0 or high < low:
            raise ValueError(f"Invalid bet range: {bet_range}")
        if not 0.0 <= insurance_rate <= 1.0:
            raise ValueError("insurance_rate must be between 0 and 1")

        self._rng = rng or Random()
        self._bet_range = bet_range
        self._insurance_rate = insurance_rate
        self._last_bet = 0

    def choose_bet(self) -> int:
        self._last_bet = self._rng.randint(*self._bet_range)
        return self._last_bet

    def choose_insurance(self) -> int:
        if self._rng.random() < self._insurance_rate:
            return self._last_bet // 2
        return 0

    def next_action(self) -> Action:
        return self._rng.choice([Action.HIT, Action.STAND, Action.DOUBLE])
