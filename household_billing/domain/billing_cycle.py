"""Statement-cycle rules: which closing day governs a purchase and which month it first bills on"""

import logging
from datetime import date
from fractions import Fraction
from typing import Mapping

from household_billing.domain.exceptions import InvalidInstallmentCount, UnresolvableCardReference
from household_billing.domain.models import Card, Purchase
from household_billing.utils.date_utils import YearMonth

DEFAULT_CLOSING_DAY = 18

logger = logging.getLogger(__name__)


def resolve_closing_day(
    purchase: Purchase,
    cards_by_id: Mapping[str, Card],
    strict: bool = False,
    default: int = DEFAULT_CLOSING_DAY,
) -> int:
    """
    Find the closing day that governs a purchase.

    Precedence:
    1. The referenced card's closing day, when the card is known
    2. The closing day embedded in the purchase
    3. `default` (18)

    Raises:
        UnresolvableCardReference: in strict mode, when the purchase references
            a card that is not in `cards_by_id`
    """
    if purchase.card_reference is not None:
        card = cards_by_id.get(purchase.card_reference)
        if card is not None:
            return card.closing_day
        if strict:
            raise UnresolvableCardReference(
                f"Purchase {purchase.id} references unknown card {purchase.card_reference}"
            )
        logger.debug(
            "Card not found, falling back",
            extra={"purchase_id": purchase.id, "card_reference": purchase.card_reference},
        )

    if purchase.fallback_closing_day is not None:
        return purchase.fallback_closing_day

    return default


def billing_month(purchase_date: date, closing_day: int) -> YearMonth:
    """
    First statement month for a purchase.

    A purchase made on or after the closing day missed that cycle and shows up
    on the following month's statement.
    """
    month = YearMonth.from_date(purchase_date)
    if purchase_date.day >= closing_day:
        return month.shift(1)
    return month


def installment_amount(purchase: Purchase) -> Fraction:
    """
    Exact per-installment amount: total / count.

    Raises:
        InvalidInstallmentCount: if the count is not a positive integer
    """
    count = purchase.installment_count
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidInstallmentCount(
            f"Purchase {purchase.id} has installment count {count!r}; at least 1 is required"
        )

    # str() first so floats contribute their decimal literal, not their binary expansion
    return Fraction(str(purchase.total_amount)) / count
