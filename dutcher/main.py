#!/usr/bin/env python3
"""Dutcher - Dutching Stake Calculator CLI."""

import argparse
import logging
import sys

from rich.console import Console

from dutcher.calculator import DutchingCalculator
from dutcher.config import config
from dutcher.display import copy_to_output, display_round, print_header, print_info


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Dutcher - spread one stake so every outcome pays the same",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dutcher --stake 100 --odds 200 300 600    # Odds 2.00 / 3.00 / 6.00
  dutcher --stake 100 --odds 150 4          # Odds 1.50 / 4
  dutcher --stake 50 --odds 210 350 --json  # Print the round as JSON
  dutcher --stake 100 --odds 150 400 --copy 2

Odds are typed as digits only: the last two digits are the decimals
once more than two are given, so 150 means 1.50 and 12 means 12.
        """,
    )

    parser.add_argument(
        "--stake", "-s",
        default="",
        help="Total investment to spread across the legs (default: 0)",
    )

    parser.add_argument(
        "--odds", "-o",
        nargs="+",
        default=[],
        metavar="ODDS",
        help="Odds for each leg as typed digits (e.g., --odds 150 400)",
    )

    parser.add_argument(
        "--copy",
        type=int,
        metavar="LEG",
        help="Write the stake of leg LEG (1-based) to stdout",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the round as JSON instead of a table",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    calculator = DutchingCalculator()
    while calculator.leg_count < len(args.odds):
        calculator.add_leg()

    calculator.set_total_investment(args.stake)
    odds_text = [calculator.update_leg_odds(i, raw) for i, raw in enumerate(args.odds)]

    if args.copy is not None:
        if not 1 <= args.copy <= calculator.leg_count:
            parser.error(f"--copy must be between 1 and {calculator.leg_count}")
        stake = calculator.legs[args.copy - 1].stake
        copy_to_output(stake, sys.stdout.write)
        sys.stdout.write("\n")
        return 0

    if args.json:
        print(calculator.snapshot().model_dump_json(indent=2))
        return 0

    console = Console()
    print_header("Dutching Calculator", console=console)
    if not any(leg.is_active for leg in calculator.legs):
        print_info("No leg has odds yet; stakes stay at zero.", console=console)
    display_round(calculator, odds_text, console=console)

    return 0


if __name__ == "__main__":
    sys.exit(main())
