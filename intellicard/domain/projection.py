"""Billing projection engine - attributes purchases and installments to statement months"""

from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from intellicard.domain.billing import resolve_first_billing_month
from intellicard.domain.models import (
    Card,
    Contribution,
    MonthlyProjection,
    ProjectionDetail,
    Transaction,
)
from intellicard.utils.date_utils import generate_month_range, month_start, months_between
from intellicard.utils.formatting import format_month_label, quantize_cents

PROJECTION_MONTHS = 12

LabelFormatter = Callable[[int, int], str]


def iter_contributions(transaction: Transaction, card: Card, target_month: date) -> Iterator[Contribution]:
    """
    Yield what a transaction bills in the month starting at target_month.

    - Recurring charges bill their full value every month from the first
      billing month onward, with no end
    - Installment purchases bill value / installments in each of the
      consecutive months starting at the first billing month

    Both the projection and the detail drill-down go through here so their
    totals always agree.
    """
    first_bill = month_start(
        resolve_first_billing_month(transaction.date, card.closing_day, card.due_day)
    )

    if transaction.is_recurring:
        if target_month >= first_bill:
            yield Contribution(
                installment_number=1,
                total_installments=1,
                value=transaction.value,
                is_recurring=True,
            )
        return

    # installment k bills k months after the first bill
    inst = months_between(first_bill, target_month)
    if 0 <= inst < transaction.installments:
        yield Contribution(
            installment_number=inst + 1,
            total_installments=transaction.installments,
            value=transaction.value / transaction.installments,
            is_recurring=False,
        )


def _cards_by_id(cards: Sequence[Card]) -> Dict[str, Card]:
    return {c.id: c for c in cards}


def project_months(
    cards: Sequence[Card],
    transactions: Sequence[Transaction],
    today: Optional[date] = None,
    months: int = PROJECTION_MONTHS,
    label_formatter: Optional[LabelFormatter] = None,
) -> List[MonthlyProjection]:
    """
    Project billed totals for each month starting at today's month.

    Transactions whose card is missing are skipped. Per-card and grand
    totals are accumulated at full precision and rounded to cents
    independently at the end of each month.
    """
    if today is None:
        today = date.today()
    fmt = label_formatter or format_month_label
    by_id = _cards_by_id(cards)

    projection = []
    for index, target in enumerate(generate_month_range(today, months)):
        total = Decimal("0")
        per_card: Dict[str, Decimal] = {c.id: Decimal("0") for c in cards}

        for txn in transactions:
            card = by_id.get(txn.card_id)
            if card is None:
                continue
            for contribution in iter_contributions(txn, card, target):
                per_card[card.id] += contribution.value
                total += contribution.value

        projection.append(
            MonthlyProjection(
                month_label=fmt(target.year, target.month),
                month_start=target,
                total=quantize_cents(total),
                per_card={card_id: quantize_cents(v) for card_id, v in per_card.items()},
                is_current_month=index == 0,
            )
        )

    return projection


def project_twelve_months(
    cards: Sequence[Card],
    transactions: Sequence[Transaction],
    today: Optional[date] = None,
    label_formatter: Optional[LabelFormatter] = None,
) -> List[MonthlyProjection]:
    """Main entry point: 12-month statement projection, current month first"""
    return project_months(cards, transactions, today=today, label_formatter=label_formatter)


def monthly_details(
    target_month: date,
    cards: Sequence[Card],
    transactions: Sequence[Transaction],
) -> List[ProjectionDetail]:
    """Line items billed in target_month's statement, largest value first"""
    target = month_start(target_month)
    by_id = _cards_by_id(cards)

    details = []
    for txn in transactions:
        card = by_id.get(txn.card_id)
        if card is None:
            continue
        for contribution in iter_contributions(txn, card, target):
            details.append(
                ProjectionDetail(
                    description=txn.description,
                    card_name=card.name,
                    card_color=card.color,
                    installment_number=contribution.installment_number,
                    total_installments=contribution.total_installments,
                    value=contribution.value,
                    is_recurring=contribution.is_recurring,
                    transaction_id=txn.id,
                    card_id=card.id,
                )
            )

    # sorted() is stable, equal values keep input order
    return sorted(details, key=lambda d: d.value, reverse=True)


def count_orphans(cards: Sequence[Card], transactions: Sequence[Transaction]) -> int:
    """Number of transactions referencing a card that is not in cards"""
    by_id = _cards_by_id(cards)
    return sum(1 for t in transactions if t.card_id not in by_id)
