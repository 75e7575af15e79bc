"""Dutching stake calculator."""

from importlib import metadata

from dutcher.allocation import allocate
from dutcher.calculator import DutchingCalculator
from dutcher.models import Leg, Round
from dutcher.normalizer import normalize_odds, parse_amount, parse_odds

try:
    __version__ = metadata.version("dutcher")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "DutchingCalculator",
    "Leg",
    "Round",
    "allocate",
    "normalize_odds",
    "parse_amount",
    "parse_odds",
    "__version__",
]
