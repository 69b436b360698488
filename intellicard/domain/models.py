"""Domain models - pure Python dataclasses representing cards, purchases and projections"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict


@dataclass(frozen=True)
class Card:
    """Credit card registered by the user"""

    id: str
    name: str
    total_limit: Decimal
    closing_day: int  # 1..31, charges on/after this day roll to next statement
    due_day: int  # 1..31
    color: str = ""


@dataclass(frozen=True)
class Transaction:
    """Purchase charged to a card, optionally split or recurring"""

    id: str
    description: str
    value: Decimal  # total amount, before installment split
    date: date
    card_id: str
    installments: int = 1
    is_recurring: bool = False


@dataclass(frozen=True)
class Contribution:
    """One transaction's share of one statement month"""

    installment_number: int
    total_installments: int
    value: Decimal
    is_recurring: bool


@dataclass
class MonthlyProjection:
    """Billed amounts for a single month of the projection window"""

    month_label: str
    month_start: date
    total: Decimal = Decimal("0")
    per_card: Dict[str, Decimal] = field(default_factory=dict)
    is_current_month: bool = False

    @property
    def key(self) -> str:
        return f"{self.month_start.year:04d}-{self.month_start.month:02d}"


@dataclass(frozen=True)
class ProjectionDetail:
    """Line item contributing to a month's statement"""

    description: str
    card_name: str
    card_color: str
    installment_number: int
    total_installments: int
    value: Decimal
    is_recurring: bool
    transaction_id: str = ""
    card_id: str = ""


@dataclass(frozen=True)
class CardUsage:
    """How much of a card's limit is committed"""

    card_id: str
    used: Decimal
    available: Decimal
    usage_percent: float
    is_high_usage: bool


@dataclass(frozen=True)
class InvoiceStatus:
    """Whether the current statement still accepts charges"""

    label: str
    is_open: bool
