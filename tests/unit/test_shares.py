"""Unit tests for the self/others payer split"""

from fractions import Fraction

import pytest

from household_billing.domain.models import MonthlyProjection, Payer
from household_billing.domain.shares import split_shares
from household_billing.utils.date_utils import YearMonth


def make_projection(totals: dict) -> MonthlyProjection:
    return MonthlyProjection(
        month=YearMonth(2024, 5),
        total=sum(totals.values(), Fraction(0)),
        totals_by_payer=totals,
    )


def test_split_own_plus_half_shared():
    projection = make_projection({Payer.partner_a(): Fraction(100), Payer.shared(): Fraction(200)})
    share = split_shares(projection, Payer.partner_a())

    assert share.self_share == Fraction(200)
    assert share.others_share == Fraction(100)


def test_split_from_partner_b_view():
    projection = make_projection(
        {
            Payer.partner_a(): Fraction(100),
            Payer.partner_b(): Fraction(40),
            Payer.shared(): Fraction(200),
        }
    )
    share = split_shares(projection, Payer.partner_b())

    assert share.self_share == Fraction(140)
    assert share.others_share == Fraction(200)


def test_custom_payers_count_as_others():
    projection = make_projection({Payer.partner_a(): Fraction(10), Payer.other("Grandma"): Fraction(90)})
    share = split_shares(projection, Payer.partner_a())

    assert share.self_share == Fraction(10)
    assert share.others_share == Fraction(90)


def test_split_odd_shared_amount_stays_exact():
    projection = make_projection({Payer.shared(): Fraction("0.01")})
    share = split_shares(projection, Payer.partner_a())

    assert share.self_share == Fraction(1, 200)
    assert share.self_share + share.others_share == projection.total


def test_split_with_custom_shared_bucket():
    household = Payer.other("Household")
    projection = make_projection({household: Fraction(50), Payer.shared(): Fraction(30)})
    share = split_shares(projection, Payer.partner_a(), shared_payer=household)

    assert share.self_share == Fraction(25)
    assert share.others_share == Fraction(55)


def test_split_empty_month():
    share = split_shares(MonthlyProjection(month=YearMonth(2024, 1)), Payer.partner_a())
    assert share.self_share == 0
    assert share.others_share == 0


def test_split_rejects_shared_bucket_as_self():
    """The shared bucket cannot also be the viewer; its half would be counted twice"""
    projection = make_projection({Payer.shared(): Fraction(200)})
    with pytest.raises(ValueError):
        split_shares(projection, Payer.shared())


def test_split_rejects_custom_shared_bucket_as_self():
    household = Payer.other("Household")
    with pytest.raises(ValueError):
        split_shares(make_projection({household: Fraction(10)}), household, shared_payer=household)
