"""Live dutching round that keeps its stakes in step with its inputs."""

import logging
from dataclasses import replace
from decimal import Decimal

from dutcher.allocation import allocate, round_currency, total_implied
from dutcher.config import config
from dutcher.models import ZERO, Leg, Round
from dutcher.normalizer import normalize_odds, parse_amount, parse_odds
from dutcher.schemas import LegSnapshot, RoundSnapshot

logger = logging.getLogger(__name__)


class DutchingCalculator:
    """
    Owns one Round and re-runs the allocation after every mutation.

    A recompute is keyed on (total investment, odds of every leg in order).
    Each mutation ends in a single pass against the latest state, and a pass
    whose key matches the last one computed does nothing, so repeated or
    rapid edits never leave an older allocation in place.
    """

    def __init__(self, min_legs: int | None = None):
        self.min_legs = min_legs if min_legs is not None else config.min_legs
        self._round = self._initial_round()
        self._computed_key: tuple | None = None
        self._recompute()

    def _initial_round(self) -> Round:
        legs = [Leg() for _ in range(max(config.initial_legs, self.min_legs))]
        return Round(legs=legs, total_investment=ZERO)

    # State ------------------------------------------------------------

    @property
    def total_investment(self) -> Decimal:
        return self._round.total_investment

    @property
    def legs(self) -> list[Leg]:
        """Copies of the current legs; edit through the calculator instead."""
        return [replace(leg) for leg in self._round.legs]

    @property
    def leg_count(self) -> int:
        return len(self._round.legs)

    # Mutations --------------------------------------------------------

    def set_total_investment(self, value) -> Decimal:
        """Replace the total investment. Empty or non-numeric input counts as 0."""
        self._round.total_investment = parse_amount(value)
        self._recompute()
        return self._round.total_investment

    def update_leg_odds(self, index: int, raw_text: str) -> str:
        """
        Feed raw input for one leg's odds through the normalizer.

        Returns the normalized text for the input widget to show.
        Raises IndexError for a leg that does not exist.
        """
        normalized = normalize_odds(raw_text)
        leg = self._round.legs[index]
        self._round.legs[index] = replace(leg, odds=parse_odds(normalized))
        self._recompute()
        return normalized

    def add_leg(self, label: str = "") -> int:
        """Append an inactive leg and return the new leg count."""
        self._round.legs.append(Leg(label=label))
        self._recompute()
        return self.leg_count

    def remove_leg(self, index: int) -> bool:
        """Remove a leg unless the round is already at its minimum size."""
        if self.leg_count <= self.min_legs:
            logger.debug("Rejected removal of leg %s: round has %d legs", index, self.leg_count)
            return False
        del self._round.legs[index]
        self._recompute()
        return True

    def reset(self) -> None:
        """Back to two empty legs and nothing invested."""
        self._round = self._initial_round()
        self._computed_key = None
        self._recompute()

    def refresh(self) -> None:
        """Force an allocation pass even if the inputs are unchanged."""
        self._computed_key = None
        self._recompute()

    def _recompute(self) -> bool:
        key = (self._round.total_investment, self._round.odds_key)
        if key == self._computed_key:
            return False

        self._round.legs = allocate(self._round.total_investment, self._round.legs)
        self._computed_key = key
        logger.debug(
            "Allocated %s across %d legs: %s",
            self._round.total_investment,
            self.leg_count,
            [str(leg.stake) for leg in self._round.legs],
        )
        return True

    # Derived values ---------------------------------------------------

    def leg_return(self, index: int) -> Decimal:
        return round_currency(self._round.legs[index].potential_return)

    @property
    def total_return(self) -> Decimal:
        """
        Payout of the round, taken from the first leg with odds and stake.

        All active legs pay the same up to the cent absorbed by the
        correction leg, so any one of them stands for the round.
        """
        for leg in self._round.legs:
            if leg.odds > 0 and leg.stake > 0:
                return round_currency(leg.potential_return)
        return round_currency(ZERO)

    @property
    def profit(self) -> Decimal:
        return round_currency(self.total_return - self._round.total_investment)

    @property
    def profit_percent(self) -> Decimal:
        if self._round.total_investment == 0:
            return round_currency(ZERO)
        return round_currency(self.profit / self._round.total_investment * 100)

    @property
    def book_percent(self) -> Decimal:
        """Sum of implied probabilities of the active legs, as a percentage."""
        return round_currency(total_implied(self._round.legs) * 100)

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            total_investment=self._round.total_investment,
            total_return=self.total_return,
            profit=self.profit,
            profit_percent=self.profit_percent,
            book_percent=self.book_percent,
            legs=[
                LegSnapshot(
                    index=i,
                    label=leg.label or default_label(i),
                    odds=leg.odds,
                    stake=leg.stake,
                    potential_return=self.leg_return(i),
                    active=leg.is_active,
                )
                for i, leg in enumerate(self._round.legs)
            ],
        )


def default_label(index: int) -> str:
    """Ordinal shown for an unnamed leg: 1º, 2º, ..."""
    return f"{index + 1}º"
