"""Billing projector - places purchase installments on monthly card statements"""

from dataclasses import dataclass
from datetime import date
from fractions import Fraction
from typing import Dict, Iterable, List, Sequence

from household_billing.domain.billing_cycle import (
    DEFAULT_CLOSING_DAY,
    billing_month,
    installment_amount,
    resolve_closing_day,
)
from household_billing.domain.models import Card, MonthlyProjection, ProjectedInstallment, Purchase
from household_billing.utils.date_utils import YearMonth, parse_civil_date


@dataclass(frozen=True)
class _Schedule:
    """Validated billing facts for one purchase"""

    purchase: Purchase
    purchase_date: date
    first_month_index: int
    amount: Fraction


def _schedule(
    purchase: Purchase,
    cards_by_id: Dict[str, Card],
    strict: bool,
    default_closing_day: int,
) -> _Schedule:
    purchase_date = parse_civil_date(purchase.purchase_date)
    amount = installment_amount(purchase)
    closing_day = resolve_closing_day(purchase, cards_by_id, strict=strict, default=default_closing_day)

    return _Schedule(
        purchase=purchase,
        purchase_date=purchase_date,
        first_month_index=billing_month(purchase_date, closing_day).index,
        amount=amount,
    )


def project(
    purchases: Iterable[Purchase],
    cards: Iterable[Card],
    horizon: Sequence[YearMonth],
    strict: bool = False,
    default_closing_day: int = DEFAULT_CLOSING_DAY,
) -> List[MonthlyProjection]:
    """
    Project purchase installments onto the months of `horizon`.

    Algorithm:
    - Each purchase bills first in its billing month (purchase month, or the
      next one when bought on/after the card's closing day)
    - Installment k (1-based) lands k-1 months after the billing month
    - Every installment is total / count, kept as an exact Fraction, so a
      purchase's installments always sum to its total

    Returns one MonthlyProjection per horizon entry, in horizon order. Months
    with nothing billed are returned empty. Installments outside the horizon
    are dropped. Items in a month are ordered by purchase date, then purchase id.

    Raises:
        InvalidDateFormat: a purchase date is not a YYYY-MM-DD civil date
        InvalidInstallmentCount: a purchase has fewer than one installment
        UnresolvableCardReference: strict mode only, unknown card reference

    Every purchase is validated before any output is built, so a failure never
    yields partial results.
    """
    cards_by_id = {card.id: card for card in cards}
    schedules = [_schedule(p, cards_by_id, strict, default_closing_day) for p in purchases]

    projections = []
    for month in horizon:
        projection = MonthlyProjection(month=month)
        for schedule in schedules:
            purchase = schedule.purchase
            diff = month.index - schedule.first_month_index
            if not 0 <= diff < purchase.installment_count:
                continue

            projection.total += schedule.amount
            projection.totals_by_payer[purchase.payer] = (
                projection.totals_by_payer.get(purchase.payer, Fraction(0)) + schedule.amount
            )
            projection.items.append(
                ProjectedInstallment(
                    purchase_id=purchase.id,
                    month=month,
                    installment_index=diff + 1,
                    installment_count=purchase.installment_count,
                    amount=schedule.amount,
                    description=purchase.description,
                    payer=purchase.payer,
                    purchase_date=schedule.purchase_date,
                    card_reference=purchase.card_reference,
                    location=purchase.location,
                    observation=purchase.observation,
                )
            )

        projection.items.sort(key=lambda item: (item.purchase_date, str(item.purchase_id)))
        projections.append(projection)

    return projections
