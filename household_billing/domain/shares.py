"""Split a month's bill between the viewing payer and everyone else"""

from fractions import Fraction

from household_billing.domain.models import MonthlyProjection, Payer, PayerShare


def split_shares(
    projection: MonthlyProjection,
    self_payer: Payer,
    shared_payer: Payer | None = None,
) -> PayerShare:
    """
    Compute the viewer's share of a month.

    self_share = own purchases + half of the shared purchases
    others_share = everything else in the month's total

    Raises:
        ValueError: if `self_payer` is the shared bucket itself

    Example:
        total 300 = {A: 100, shared: 200}, viewer A
        self_share = 100 + 200 / 2 = 200, others_share = 100
    """
    if shared_payer is None:
        shared_payer = Payer.shared()
    if self_payer == shared_payer:
        raise ValueError(f"Self payer {self_payer.key} cannot also be the shared bucket")

    own = projection.totals_by_payer.get(self_payer, Fraction(0))
    shared = projection.totals_by_payer.get(shared_payer, Fraction(0))
    self_share = own + shared / 2

    return PayerShare(self_share=self_share, others_share=projection.total - self_share)
