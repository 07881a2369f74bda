"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

from blackjack_sim.rules import TableRules


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _parse_optional_int(name: str) -> int | None:
    """Parse an integer environment variable; blank or unset means None."""
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class TableConfig:
    """Table rule configuration."""

    min_bet: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_MIN_BET", "10")))
    max_bet: int | None = field(default_factory=lambda: _parse_optional_int("BLACKJACK_MAX_BET"))
    dealer_draws: bool = field(default_factory=lambda: _env_flag("BLACKJACK_DEALER_DRAWS"))
    dealer_hits_soft_17: bool = field(default_factory=lambda: _env_flag("BLACKJACK_HITS_SOFT_17"))
    double_after_hit: bool = field(
        default_factory=lambda: _env_flag("BLACKJACK_DOUBLE_AFTER_HIT")
    )

    def to_rules(self) -> TableRules:
        """Build the validated rule set."""
        return TableRules(
            min_bet=self.min_bet,
            max_bet=self.max_bet,
            dealer_draws=self.dealer_draws,
            dealer_hits_soft_17=self.dealer_hits_soft_17,
            double_after_hit=self.double_after_hit,
        )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    seed: int | None = field(default_factory=lambda: _parse_optional_int("BLACKJACK_SEED"))
    rounds: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_ROUNDS", "10")))
    players: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_PLAYERS", "3")))
    wallet: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_WALLET", "1000")))

    table: TableConfig = field(default_factory=TableConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def configure_logging(cfg: AppConfig | None = None) -> None:
    """Call once at program start."""
    cfg = cfg or config
    level = "DEBUG" if cfg.debug else cfg.logging.level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=cfg.logging.format,
        datefmt=cfg.logging.datefmt,
    )


# Global configuration instance
config = AppConfig()
