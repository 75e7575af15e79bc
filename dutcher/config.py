"""Configuration settings for Dutcher."""

import logging
import os
from dataclasses import dataclass, field

from dutcher.models import MIN_LEGS


@dataclass
class Config:
    """Application configuration."""

    # Display settings
    currency_symbol: str = field(default_factory=lambda: os.environ.get("DUTCHER_CURRENCY", "R$"))
    decimal_places: int = 2

    # Logging
    log_level: str = field(default_factory=lambda: os.environ.get("DUTCHER_LOG_LEVEL", "WARNING"))

    # Round shape
    min_legs: int = MIN_LEGS  # Removal below this is rejected
    initial_legs: int = MIN_LEGS

    def get_log_level(self) -> str:
        """Log level name for logging.basicConfig; unknown names give WARNING."""
        name = self.log_level.strip().upper()
        if isinstance(logging.getLevelName(name), int):
            return name
        return "WARNING"


# Global config instance
config = Config()
