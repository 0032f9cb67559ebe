"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Dict, List, Optional, Union

from household_billing.utils.date_utils import YearMonth


class PayerKind(str, Enum):
    """Who is responsible for a purchase"""

    PARTNER_A = "partner_a"
    PARTNER_B = "partner_b"
    SHARED = "shared"
    OTHER = "other"  # custom payer, identified by its label


@dataclass(frozen=True)
class Payer:
    """Payer identity; only OTHER payers carry a label"""

    kind: PayerKind
    label: Optional[str] = None

    def __post_init__(self):
        if self.kind == PayerKind.OTHER and not self.label:
            raise ValueError("Custom payers require a label")
        if self.kind != PayerKind.OTHER and self.label is not None:
            raise ValueError(f"Payer {self.kind.value} does not take a label")

    @classmethod
    def partner_a(cls) -> "Payer":
        return cls(PayerKind.PARTNER_A)

    @classmethod
    def partner_b(cls) -> "Payer":
        return cls(PayerKind.PARTNER_B)

    @classmethod
    def shared(cls) -> "Payer":
        return cls(PayerKind.SHARED)

    @classmethod
    def other(cls, label: str) -> "Payer":
        return cls(PayerKind.OTHER, label)

    @property
    def key(self) -> str:
        """Stable string key, e.g. "shared" or "other:Mom" """
        if self.kind == PayerKind.OTHER:
            return f"{self.kind.value}:{self.label}"
        return self.kind.value


@dataclass(frozen=True)
class Card:
    """Credit card whose statement closes on `closing_day`"""

    id: str
    closing_day: int  # 1-31
    name: str = ""
    due_day: Optional[int] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class Purchase:
    """Card purchase, possibly split into monthly installments"""

    id: str
    description: str
    purchase_date: Union[str, date]  # YYYY-MM-DD civil date
    total_amount: Union[Decimal, int, str]
    installment_count: int
    payer: Payer
    card_reference: Optional[str] = None
    fallback_closing_day: Optional[int] = None
    location: Optional[str] = None
    observation: Optional[str] = None


@dataclass(frozen=True)
class ProjectedInstallment:
    """One installment of a purchase, placed on a monthly statement"""

    purchase_id: str
    month: YearMonth
    installment_index: int  # 1-based
    installment_count: int
    amount: Fraction
    description: str
    payer: Payer
    purchase_date: date
    card_reference: Optional[str] = None
    location: Optional[str] = None
    observation: Optional[str] = None


@dataclass
class MonthlyProjection:
    """Everything billed on one month's statements"""

    month: YearMonth
    total: Fraction = Fraction(0)
    totals_by_payer: Dict[Payer, Fraction] = field(default_factory=dict)
    items: List[ProjectedInstallment] = field(default_factory=list)


@dataclass(frozen=True)
class PayerShare:
    """How a month's total splits between the viewing payer and everyone else"""

    self_share: Fraction
    others_share: Fraction


@dataclass(frozen=True)
class FilterOptions:
    """Distinct filter values present in a purchase collection, sorted"""

    locations: List[str]
    payers: List[Payer]
    card_references: List[str]
