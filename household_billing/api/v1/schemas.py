"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from fractions import Fraction
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from household_billing.domain.models import (
    Card,
    FilterOptions,
    MonthlyProjection,
    Payer,
    PayerKind,
    PayerShare,
    ProjectedInstallment,
    Purchase,
)
from household_billing.utils.date_utils import YearMonth


def to_cents(amount: Fraction) -> Decimal:
    """Round an exact amount to cents for display (half up, away from zero)"""
    # Integer arithmetic: a Decimal context would cap precision at 28 digits
    cents = int(abs(amount) * 100 + Fraction(1, 2))
    if amount < 0:
        cents = -cents
    return Decimal(f"{cents}E-2")


class PayerSchema(BaseModel):
    """Payer identity: a known kind, or "other" with a label"""

    kind: PayerKind
    label: Optional[str] = None

    @model_validator(mode="after")
    def check_label(self) -> "PayerSchema":
        if self.kind == PayerKind.OTHER and not self.label:
            raise ValueError("label is required for payer kind 'other'")
        if self.kind != PayerKind.OTHER and self.label is not None:
            raise ValueError(f"label is only allowed for payer kind 'other', not '{self.kind.value}'")
        return self

    def to_domain(self) -> Payer:
        return Payer(self.kind, self.label)


class CardSchema(BaseModel):
    """Card with its statement closing day"""

    id: str = Field(..., min_length=1)
    closing_day: int = Field(..., ge=1, le=31)
    name: str = ""
    due_day: Optional[int] = Field(None, ge=1, le=31)
    color: Optional[str] = None

    def to_domain(self) -> Card:
        return Card(
            id=self.id,
            closing_day=self.closing_day,
            name=self.name,
            due_day=self.due_day,
            color=self.color,
        )


class PurchaseSchema(BaseModel):
    """Purchase as supplied by the data provider"""

    id: str = Field(..., min_length=1)
    description: str = ""
    # Kept as text: the projector parses it as a civil date and reports its own error
    purchase_date: str
    total_amount: Decimal = Field(..., ge=0)
    installment_count: int = Field(1, description="Number of monthly installments")
    payer: PayerSchema
    card_reference: Optional[str] = None
    fallback_closing_day: Optional[int] = Field(None, ge=1, le=31)
    location: Optional[str] = None
    observation: Optional[str] = None

    def to_domain(self) -> Purchase:
        return Purchase(
            id=self.id,
            description=self.description,
            purchase_date=self.purchase_date,
            total_amount=self.total_amount,
            installment_count=self.installment_count,
            payer=self.payer.to_domain(),
            card_reference=self.card_reference,
            fallback_closing_day=self.fallback_closing_day,
            location=self.location,
            observation=self.observation,
        )


class FilterSchema(BaseModel):
    """Dashboard filters; omitted fields match everything"""

    location: Optional[str] = None
    payer: Optional[PayerSchema] = None
    card_reference: Optional[str] = None


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projections"""

    purchases: List[PurchaseSchema] = Field(default_factory=list)
    cards: List[CardSchema] = Field(default_factory=list)
    horizon: Optional[List[str]] = Field(None, description="Target months as YYYY-MM, in output order")
    anchor: Optional[date] = Field(None, description="Anchor date for the default horizon (defaults to today)")
    strict: Optional[bool] = Field(None, description="Treat unknown card references as errors")
    filters: Optional[FilterSchema] = None
    self_payer: Optional[PayerSchema] = Field(None, description="Compute self/others shares for this payer")

    @field_validator("horizon")
    @classmethod
    def validate_horizon(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None:
            for month in v:
                YearMonth.parse(month)
        return v

    @model_validator(mode="after")
    def check_self_payer(self) -> "ProjectionRequest":
        if self.self_payer is not None and self.self_payer.kind == PayerKind.SHARED:
            raise ValueError("self_payer must be an individual payer, not the shared bucket")
        return self


class ProjectedInstallmentSchema(BaseModel):
    """Single installment on a month's statement"""

    purchase_id: str
    description: str
    installment_index: int
    installment_count: int
    amount: Decimal
    payer: str
    purchase_date: date
    card_reference: Optional[str] = None
    location: Optional[str] = None
    observation: Optional[str] = None

    @classmethod
    def from_domain(cls, item: ProjectedInstallment) -> "ProjectedInstallmentSchema":
        return cls(
            purchase_id=item.purchase_id,
            description=item.description,
            installment_index=item.installment_index,
            installment_count=item.installment_count,
            amount=to_cents(item.amount),
            payer=item.payer.key,
            purchase_date=item.purchase_date,
            card_reference=item.card_reference,
            location=item.location,
            observation=item.observation,
        )


class PayerShareSchema(BaseModel):
    """Self/others split of a month's total"""

    self_share: Decimal
    others_share: Decimal

    @classmethod
    def from_domain(cls, share: PayerShare) -> "PayerShareSchema":
        return cls(self_share=to_cents(share.self_share), others_share=to_cents(share.others_share))


class MonthlyProjectionSchema(BaseModel):
    """Projection for one month"""

    month: str
    total: Decimal
    totals_by_payer: Dict[str, Decimal]
    items: List[ProjectedInstallmentSchema]
    shares: Optional[PayerShareSchema] = None

    @classmethod
    def from_domain(
        cls,
        projection: MonthlyProjection,
        shares: Optional[PayerShare] = None,
    ) -> "MonthlyProjectionSchema":
        return cls(
            month=str(projection.month),
            total=to_cents(projection.total),
            totals_by_payer={payer.key: to_cents(amount) for payer, amount in projection.totals_by_payer.items()},
            items=[ProjectedInstallmentSchema.from_domain(item) for item in projection.items],
            shares=PayerShareSchema.from_domain(shares) if shares is not None else None,
        )


class FilterOptionsSchema(BaseModel):
    """Distinct values available to the dashboard filters"""

    locations: List[str]
    payers: List[PayerSchema]
    card_references: List[str]

    @classmethod
    def from_domain(cls, options: FilterOptions) -> "FilterOptionsSchema":
        return cls(
            locations=options.locations,
            payers=[PayerSchema(kind=p.kind, label=p.label) for p in options.payers],
            card_references=options.card_references,
        )


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projections"""

    months: List[MonthlyProjectionSchema]
    filter_options: FilterOptionsSchema
