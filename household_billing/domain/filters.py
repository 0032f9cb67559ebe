"""Dashboard filters applied to purchases before projecting"""

from typing import Iterable, List, Optional

from household_billing.domain.models import FilterOptions, Payer, Purchase


def filter_purchases(
    purchases: Iterable[Purchase],
    location: Optional[str] = None,
    payer: Optional[Payer] = None,
    card_reference: Optional[str] = None,
) -> List[Purchase]:
    """
    Keep purchases matching every given criterion.

    - location: substring of the purchase location (missing location counts as "")
    - payer: exact payer
    - card_reference: exact card

    An empty or None criterion matches everything.
    """
    return [
        p
        for p in purchases
        if (not location or location in (p.location or ""))
        and (payer is None or p.payer == payer)
        and (not card_reference or p.card_reference == card_reference)
    ]


def filter_options(purchases: Iterable[Purchase]) -> FilterOptions:
    """Distinct locations, payers and cards to offer as filter choices"""
    purchases = list(purchases)
    return FilterOptions(
        locations=sorted({p.location for p in purchases if p.location}),
        payers=sorted({p.payer for p in purchases}, key=lambda payer: payer.key),
        card_references=sorted({p.card_reference for p in purchases if p.card_reference}),
    )
