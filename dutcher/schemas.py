"""Serializable views of a dutching round."""

from decimal import Decimal

from pydantic import BaseModel


class LegSnapshot(BaseModel):
    index: int
    label: str
    odds: Decimal
    stake: Decimal
    potential_return: Decimal
    active: bool


class RoundSnapshot(BaseModel):
    total_investment: Decimal
    total_return: Decimal
    profit: Decimal
    profit_percent: Decimal
    book_percent: Decimal
    legs: list[LegSnapshot]
