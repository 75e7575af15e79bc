"""Dutching stake allocation across the legs of a round."""

from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP, getcontext, localcontext
from typing import Sequence

from dutcher.models import CENT, ZERO, Leg, as_decimal

# Significant digits kept below the leading digit of an amount
GUARD_DIGITS = 30


def _precision_for(value: Decimal) -> int:
    """Context precision that holds value down to its cents."""
    return max(getcontext().prec, value.adjusted() + GUARD_DIGITS)


def round_currency(value: Decimal) -> Decimal:
    """Round to whole cents, halves away from zero."""
    value = as_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision_for(value)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def implied_weight(odds: Decimal) -> Decimal:
    """Implied probability of a leg, used as its share of the stake."""
    return 1 / as_decimal(odds)


def total_implied(legs: Sequence[Leg]) -> Decimal:
    """Sum of implied probabilities over the active legs (0 if none)."""
    return sum((implied_weight(leg.odds) for leg in legs if leg.is_active), ZERO)


def allocate(total_investment: Decimal, legs: Sequence[Leg]) -> list[Leg]:
    """
    Split a total investment so every active leg pays out the same.

    Each active leg gets a share proportional to its implied probability:

        stake_i = total * (1/odds_i) / sum(1/odds_j for active j)

    so that stake_i * odds_i is identical across the active legs. Stakes are
    rounded to cents and whatever the rounding lost or gained is added to the
    last active leg, which keeps the stakes summing to the rounded total.

    Args:
        total_investment: Amount to spread; zero and negative are allowed
        legs: Legs in display order; odds <= 0 marks a leg as inactive

    Returns:
        New Leg objects with odds and labels untouched and stakes filled in.
        With no active leg the legs come back unchanged.
    """
    total = as_decimal(total_investment)

    if not any(leg.is_active for leg in legs):
        return [replace(leg) for leg in legs]

    with localcontext() as ctx:
        ctx.prec = _precision_for(total)

        weight_sum = total_implied(legs)

        allocated = []
        for leg in legs:
            if not leg.is_active:
                allocated.append(replace(leg, stake=Decimal("0.00")))
                continue
            stake = total * implied_weight(leg.odds) / weight_sum
            allocated.append(replace(leg, stake=round_currency(stake)))

        difference = round_currency(total) - sum((leg.stake for leg in allocated), ZERO)

        if difference != 0:
            last = max(i for i, leg in enumerate(allocated) if leg.is_active)
            corrected = round_currency(allocated[last].stake + difference)
            allocated[last] = replace(allocated[last], stake=corrected)

    return allocated


def leg_returns(legs: Sequence[Leg]) -> list[Decimal]:
    """Payout of each leg if it wins, in cents."""
    return [round_currency(leg.potential_return) for leg in legs]
