"""Projection endpoints - 12-month statement forecast and per-month drill-down"""

import time
from datetime import date
from decimal import Decimal
from typing import Sequence
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from intellicard.api.v1.schemas import (
    DetailsRequest,
    DetailsResponse,
    MonthlyProjectionOut,
    ProjectionDetailOut,
    ProjectionRequest,
    ProjectionResponse,
)
from intellicard.api.dependencies import get_request_id, get_today
from intellicard.config import settings
from intellicard.domain.exceptions import InvalidMonthError
from intellicard.domain.models import Card, Transaction
from intellicard.domain.projection import count_orphans, monthly_details, project_months
from intellicard.infrastructure.observability.logging import log_projection
from intellicard.infrastructure.observability.metrics import record_projection
from intellicard.infrastructure.store.wallet import WalletStore, get_store
from intellicard.utils.date_utils import month_key, parse_month_key
from intellicard.utils.formatting import quantize_cents

router = APIRouter()


def _observe(kind: str, request_id: str, months: int, cards: Sequence[Card], transactions: Sequence[Transaction], start_time: float) -> None:
    duration = time.time() - start_time
    orphans = count_orphans(cards, transactions)
    record_projection(kind, duration, orphans)
    log_projection(request_id, kind, months, len(cards), len(transactions), orphans, duration * 1000)


def _projection(request: Request, cards: Sequence[Card], transactions: Sequence[Transaction], today: date) -> ProjectionResponse:
    start_time = time.time()
    months = project_months(cards, transactions, today=today, months=settings.projection_months)
    _observe("projection", get_request_id(request), len(months), cards, transactions, start_time)
    return ProjectionResponse(months=[MonthlyProjectionOut.from_domain(m) for m in months])


def _details(request: Request, month: str, cards: Sequence[Card], transactions: Sequence[Transaction]) -> DetailsResponse:
    try:
        target = parse_month_key(month)
    except InvalidMonthError as e:
        raise HTTPException(status_code=400, detail=str(e))

    start_time = time.time()
    details = monthly_details(target, cards, transactions)
    _observe("details", get_request_id(request), 1, cards, transactions, start_time)

    total = sum((d.value for d in details), Decimal("0"))
    return DetailsResponse(
        month=month_key(target),
        total=float(quantize_cents(total)),
        items=[ProjectionDetailOut.from_domain(d) for d in details],
    )


@router.get("/projection", response_model=ProjectionResponse)
def get_projection(
    request: Request,
    store: WalletStore = Depends(get_store),
    today: date = Depends(get_today),
):
    """
    Forecast statement totals for the stored cards and transactions.

    Returns:
        One entry per month starting at the current month, with per-card
        totals and the grand total, rounded to cents
    """
    cards, transactions = store.snapshot()
    return _projection(request, cards, transactions, today)


@router.get("/projection/details", response_model=DetailsResponse)
def get_projection_details(
    request: Request,
    month: str = Query(..., description="Target month as YYYY-MM"),
    store: WalletStore = Depends(get_store),
):
    """Line items billed in one month, largest first"""
    cards, transactions = store.snapshot()
    return _details(request, month, cards, transactions)


@router.post("/projection/compute", response_model=ProjectionResponse)
def compute_projection(
    request: Request,
    body: ProjectionRequest,
    today: date = Depends(get_today),
):
    """Stateless projection over a posted snapshot of cards and transactions"""
    cards = [c.to_domain() for c in body.cards]
    transactions = [t.to_domain() for t in body.transactions]
    return _projection(request, cards, transactions, today)


@router.post("/projection/details/compute", response_model=DetailsResponse)
def compute_projection_details(request: Request, body: DetailsRequest):
    """Stateless drill-down over a posted snapshot"""
    cards = [c.to_domain() for c in body.cards]
    transactions = [t.to_domain() for t in body.transactions]
    return _details(request, body.month, cards, transactions)
