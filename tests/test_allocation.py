from decimal import Decimal, localcontext

from dutcher.allocation import allocate, leg_returns, round_currency, total_implied
from dutcher.models import Leg


def _legs(*odds):
    return [Leg(odds=Decimal(str(o))) for o in odds]


def _stakes(legs):
    return [leg.stake for leg in legs]


def test_three_way_split_needs_no_correction():
    result = allocate(Decimal("100"), _legs("2.00", "3.00", "6.00"))

    assert _stakes(result) == [Decimal("50.00"), Decimal("33.33"), Decimal("16.67")]
    assert sum(_stakes(result)) == Decimal("100.00")
    for leg in result:
        assert abs(leg.potential_return - Decimal("100")) <= leg.odds * Decimal("0.005")


def test_two_way_split_conserves_cents():
    result = allocate(Decimal("100"), _legs("1.50", "4.00"))

    assert _stakes(result) == [Decimal("72.73"), Decimal("27.27")]
    assert sum(_stakes(result)) == Decimal("100.00")


def test_rounding_slack_goes_to_last_active_leg():
    result = allocate(Decimal("100"), _legs(3, 3, 3, 0))

    assert _stakes(result) == [
        Decimal("33.33"),
        Decimal("33.33"),
        Decimal("33.34"),
        Decimal("0.00"),
    ]


def test_negative_investment_mirrors_positive():
    result = allocate(Decimal("-100"), _legs(3, 3, 3))

    assert _stakes(result) == [Decimal("-33.33"), Decimal("-33.33"), Decimal("-33.34")]
    assert sum(_stakes(result)) == Decimal("-100.00")


def test_zero_investment_gives_zero_stakes():
    result = allocate(Decimal("0"), _legs(2, 3))

    assert _stakes(result) == [Decimal("0.00"), Decimal("0.00")]


def test_total_with_fraction_of_a_cent_is_rounded_first():
    result = allocate(Decimal("100.005"), _legs(2, 2))

    assert _stakes(result) == [Decimal("50.00"), Decimal("50.01")]
    assert sum(_stakes(result)) == round_currency(Decimal("100.005"))


def test_all_inactive_legs_are_left_alone():
    result = allocate(Decimal("100"), _legs(0, 0))

    assert _stakes(result) == [0, 0]
    assert total_implied(result) == 0


def test_no_active_legs_keeps_previous_stakes():
    legs = [Leg(odds=Decimal("0"), stake=Decimal("5.00")), Leg(odds=Decimal("-1"), stake=Decimal("3.00"))]

    result = allocate(Decimal("100"), legs)

    assert _stakes(result) == [Decimal("5.00"), Decimal("3.00")]


def test_inactive_legs_always_end_at_zero():
    legs = [
        Leg(odds=Decimal("2"), stake=Decimal("10")),
        Leg(odds=Decimal("0"), stake=Decimal("40")),
        Leg(odds=Decimal("-3"), stake=Decimal("7")),
        Leg(odds=Decimal("4"), stake=Decimal("1")),
    ]

    result = allocate(Decimal("60"), legs)

    assert result[1].stake == 0
    assert result[2].stake == 0
    assert result[0].stake + result[3].stake == Decimal("60.00")


def test_input_legs_are_not_mutated():
    legs = _legs(2, 3)
    legs[0].label = "home"

    result = allocate(Decimal("100"), legs)

    assert _stakes(legs) == [0, 0]
    assert result[0].label == "home"
    assert result[0] is not legs[0]
    assert [leg.odds for leg in result] == [leg.odds for leg in legs]


def test_allocation_is_deterministic():
    legs = _legs("1.85", "3.40", "7.25", "11.00")

    assert allocate(Decimal("250"), legs) == allocate(Decimal("250"), legs)


def test_sum_and_equal_return_hold_across_many_rounds():
    cases = [
        ("100", ["1.50", "4.00"]),
        ("37.5", ["2.10", "3.35", "4.80"]),
        ("1000", ["1.01", "50.00"]),
        ("12.34", ["1.91", "1.91", "0", "15.5"]),
        ("999.99", ["2.25", "3.10", "6.50", "9.00", "21.00"]),
        ("5", ["101.00", "1.20"]),
    ]
    for total, odds in cases:
        legs = _legs(*odds)
        result = allocate(Decimal(total), legs)

        assert sum(_stakes(result)) == round_currency(Decimal(total))

        active = [i for i, leg in enumerate(result) if leg.is_active]
        target = Decimal(total) / total_implied(legs)
        for i in active[:-1]:
            leg = result[i]
            assert abs(leg.potential_return - target) <= leg.odds * Decimal("0.005")


def test_float_odds_are_accepted():
    result = allocate(100, [Leg(odds=2.0), Leg(odds=2.0)])

    assert _stakes(result) == [Decimal("50.00"), Decimal("50.00")]


def test_leg_returns_rounds_each_payout():
    result = allocate(Decimal("100"), _legs("1.50", "4.00"))

    assert leg_returns(result) == [Decimal("109.10"), Decimal("109.08")]


def test_round_currency_rounds_halves_away_from_zero():
    assert round_currency(Decimal("0.125")) == Decimal("0.13")
    assert round_currency(Decimal("-0.125")) == Decimal("-0.13")
    assert round_currency(Decimal("0.124")) == Decimal("0.12")


def test_huge_total_keeps_cents_exact():
    total = Decimal("123456789012345678901234567890.55")

    result = allocate(total, _legs(3, 3, 3))

    with localcontext() as ctx:
        ctx.prec = 60
        assert sum(_stakes(result)) == total
    assert _stakes(result)[0] == Decimal("41152263004115226300411522630.18")


def test_round_currency_handles_large_values():
    assert round_currency(Decimal("5E+29")) == Decimal("500000000000000000000000000000.00")
