"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field
from random import Random


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Table configuration."""

    initial_balance: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_INITIAL_BALANCE", "1000"))
    )
    seed: int | None = field(default_factory=_parse_seed)

    def make_rng(self) -> Random:
        """Build the shuffle source, seeded when a seed is configured."""
        return Random(self.seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    game: GameConfig = field(default_factory=GameConfig)

    def configure_logging(self) -> None:
        """Apply the configured level to the engine's loggers."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.WARNING)
        logging.getLogger("blackjack").setLevel(level)
        logging.getLogger("transitions").setLevel(level)


# Global configuration instance
config = AppConfig()
