"""Data classes for Dutcher."""

from dataclasses import dataclass, field
from decimal import Decimal


ZERO = Decimal("0")
CENT = Decimal("0.01")
MIN_LEGS = 2


def as_decimal(value) -> Decimal:
    """Convert a number to Decimal, going through str() for floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass
class Leg:
    """One outcome in a dutching round."""
    odds: Decimal = ZERO
    stake: Decimal = Decimal("0.00")
    label: str = ""

    def __post_init__(self):
        self.odds = as_decimal(self.odds)
        self.stake = as_decimal(self.stake)

    @property
    def is_active(self) -> bool:
        """Legs with odds of zero or less sit out the allocation."""
        return self.odds > 0

    @property
    def potential_return(self) -> Decimal:
        return self.odds * self.stake


@dataclass
class Round:
    """The legs under consideration plus the amount to spread across them."""
    legs: list[Leg] = field(default_factory=lambda: [Leg() for _ in range(MIN_LEGS)])
    total_investment: Decimal = ZERO

    @property
    def odds_key(self) -> tuple[Decimal, ...]:
        return tuple(leg.odds for leg in self.legs)
