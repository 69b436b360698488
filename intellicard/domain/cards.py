"""Card-level indicators: committed limit and invoice status"""

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from intellicard.domain.models import Card, CardUsage, InvoiceStatus, Transaction
from intellicard.utils.formatting import quantize_cents

HIGH_USAGE_PERCENT = 80.0


def used_limit(card_id: str, transactions: Sequence[Transaction]) -> Decimal:
    """
    Total committed on a card.

    A purchase holds its whole value against the limit regardless of how many
    installments remain; a recurring charge holds a single occurrence.
    """
    return sum((t.value for t in transactions if t.card_id == card_id), Decimal("0"))


def card_usage(
    card: Card,
    transactions: Sequence[Transaction],
    high_usage_threshold: float = HIGH_USAGE_PERCENT,
) -> CardUsage:
    """Used/available limit and usage percentage for a card"""
    used = used_limit(card.id, transactions)
    usage_percent = float(used / card.total_limit * 100) if card.total_limit > 0 else 0.0

    return CardUsage(
        card_id=card.id,
        used=quantize_cents(used),
        available=quantize_cents(card.total_limit - used),
        usage_percent=round(usage_percent, 2),
        is_high_usage=usage_percent >= high_usage_threshold,
    )


def invoice_status(closing_day: int, today: Optional[date] = None) -> InvoiceStatus:
    """Invoice is open ('Aberta') before the closing day and closed ('Fechada') from it on"""
    if today is None:
        today = date.today()
    if today.day < closing_day:
        return InvoiceStatus(label="Aberta", is_open=True)
    return InvoiceStatus(label="Fechada", is_open=False)
