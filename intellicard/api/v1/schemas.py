"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from intellicard.domain.models import (
    Card,
    CardUsage,
    InvoiceStatus,
    MonthlyProjection,
    ProjectionDetail,
    Transaction,
)
from intellicard.utils.formatting import quantize_cents

# Purchases after this could bill in year 10000
LAST_PURCHASE_DATE = date(9999, 11, 30)


def _money(value: Decimal) -> float:
    return float(quantize_cents(value))


class CardIn(BaseModel):
    """Request body for POST/PUT /v1/cards"""

    id: Optional[str] = Field(None, description="Existing id to replace; generated when omitted")
    name: str = Field(..., min_length=1)
    total_limit: Decimal = Field(..., gt=0, description="Credit limit")
    closing_day: int = Field(..., ge=1, le=31, description="Statement closing day")
    due_day: int = Field(..., ge=1, le=31, description="Payment due day")
    color: str = ""

    def to_domain(self, card_id: Optional[str] = None) -> Card:
        return Card(
            id=card_id or self.id or "",
            name=self.name,
            total_limit=self.total_limit,
            closing_day=self.closing_day,
            due_day=self.due_day,
            color=self.color,
        )


class CardOut(BaseModel):
    id: str
    name: str
    total_limit: float
    closing_day: int
    due_day: int
    color: str

    @classmethod
    def from_domain(cls, card: Card) -> "CardOut":
        return cls(
            id=card.id,
            name=card.name,
            total_limit=_money(card.total_limit),
            closing_day=card.closing_day,
            due_day=card.due_day,
            color=card.color,
        )


class CardSummaryOut(BaseModel):
    """Response for GET /v1/cards/{card_id}/summary"""

    card_id: str
    used: float
    available: float
    usage_percent: float
    is_high_usage: bool
    invoice_status: str
    invoice_open: bool
    used_display: str
    available_display: str

    @classmethod
    def from_domain(cls, usage: CardUsage, status: InvoiceStatus, used_display: str, available_display: str) -> "CardSummaryOut":
        return cls(
            card_id=usage.card_id,
            used=_money(usage.used),
            available=_money(usage.available),
            usage_percent=usage.usage_percent,
            is_high_usage=usage.is_high_usage,
            invoice_status=status.label,
            invoice_open=status.is_open,
            used_display=used_display,
            available_display=available_display,
        )


class TransactionIn(BaseModel):
    """Request body for POST/PUT /v1/transactions"""

    id: Optional[str] = None
    description: str = Field(..., min_length=1)
    value: Decimal = Field(..., gt=0, description="Total amount before installment split")
    date: date
    card_id: str = Field(..., min_length=1)
    installments: int = Field(1, ge=1)
    is_recurring: bool = False

    @field_validator("date")
    @classmethod
    def date_within_calendar(cls, value):
        # the following statement month must still be a valid date
        if value > LAST_PURCHASE_DATE:
            raise ValueError(f"date must be on or before {LAST_PURCHASE_DATE.isoformat()}")
        return value

    def to_domain(self, transaction_id: Optional[str] = None) -> Transaction:
        return Transaction(
            id=transaction_id or self.id or "",
            description=self.description,
            value=self.value,
            date=self.date,
            card_id=self.card_id,
            installments=self.installments,
            is_recurring=self.is_recurring,
        )


class TransactionOut(BaseModel):
    id: str
    description: str
    value: float
    installment_value: float
    date: date
    card_id: str
    installments: int
    is_recurring: bool

    @classmethod
    def from_domain(cls, t: Transaction) -> "TransactionOut":
        per_installment = t.value if t.is_recurring else t.value / t.installments
        return cls(
            id=t.id,
            description=t.description,
            value=_money(t.value),
            installment_value=_money(per_installment),
            date=t.date,
            card_id=t.card_id,
            installments=t.installments,
            is_recurring=t.is_recurring,
        )


class MonthlyProjectionOut(BaseModel):
    month: str = Field(..., description="YYYY-MM")
    month_label: str
    month_start: date
    total: float
    per_card: Dict[str, float]
    is_current_month: bool

    @classmethod
    def from_domain(cls, p: MonthlyProjection) -> "MonthlyProjectionOut":
        return cls(
            month=p.key,
            month_label=p.month_label,
            month_start=p.month_start,
            total=_money(p.total),
            per_card={card_id: _money(v) for card_id, v in p.per_card.items()},
            is_current_month=p.is_current_month,
        )


class ProjectionResponse(BaseModel):
    """Response for projection endpoints"""

    months: List[MonthlyProjectionOut]


class ProjectionDetailOut(BaseModel):
    description: str
    card_id: str
    card_name: str
    card_color: str
    transaction_id: str
    installment_number: int
    total_installments: int
    value: float
    is_recurring: bool

    @classmethod
    def from_domain(cls, d: ProjectionDetail) -> "ProjectionDetailOut":
        return cls(
            description=d.description,
            card_id=d.card_id,
            card_name=d.card_name,
            card_color=d.card_color,
            transaction_id=d.transaction_id,
            installment_number=d.installment_number,
            total_installments=d.total_installments,
            value=_money(d.value),
            is_recurring=d.is_recurring,
        )


class DetailsResponse(BaseModel):
    """Response for projection detail endpoints"""

    month: str
    total: float
    items: List[ProjectionDetailOut]


class SnapshotCard(CardIn):
    """Card inside a posted snapshot; id is required so transactions can reference it"""

    id: str = Field(..., min_length=1)


class SnapshotTransaction(TransactionIn):
    """Transaction inside a posted snapshot; card_id may be orphaned"""

    id: str = Field(..., min_length=1)


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection/compute"""

    cards: List[SnapshotCard] = Field(default_factory=list)
    transactions: List[SnapshotTransaction] = Field(default_factory=list)


class DetailsRequest(ProjectionRequest):
    """Request body for POST /v1/projection/details/compute"""

    month: str = Field(..., description="Target month as YYYY-MM")
