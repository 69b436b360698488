"""/v1/cards - card registration, cascade delete and limit summary"""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from intellicard.api.v1.schemas import CardIn, CardOut, CardSummaryOut
from intellicard.api.dependencies import get_card_repository, get_today, get_transaction_repository
from intellicard.config import settings
from intellicard.domain.cards import card_usage, invoice_status
from intellicard.domain.exceptions import CardNotFoundError
from intellicard.infrastructure.store.repositories import CardRepository, TransactionRepository
from intellicard.utils.formatting import format_currency

router = APIRouter()


@router.get("/cards", response_model=List[CardOut])
def list_cards(cards: CardRepository = Depends(get_card_repository)):
    return [CardOut.from_domain(c) for c in cards.list()]


@router.post("/cards", response_model=CardOut, status_code=201)
def save_card(body: CardIn, cards: CardRepository = Depends(get_card_repository)):
    """Create a card, or replace it when body.id is already registered"""
    return CardOut.from_domain(cards.save(body.to_domain()))


@router.get("/cards/{card_id}", response_model=CardOut)
def get_card(card_id: str, cards: CardRepository = Depends(get_card_repository)):
    try:
        return CardOut.from_domain(cards.get(card_id))
    except CardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/cards/{card_id}", response_model=CardOut)
def update_card(card_id: str, body: CardIn, cards: CardRepository = Depends(get_card_repository)):
    try:
        cards.get(card_id)
    except CardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return CardOut.from_domain(cards.save(body.to_domain(card_id)))


@router.delete("/cards/{card_id}", status_code=204)
def delete_card(card_id: str, cards: CardRepository = Depends(get_card_repository)):
    """Delete a card together with all of its transactions"""
    try:
        removed = cards.delete(card_id)
    except CardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(status_code=204, headers={"X-Transactions-Removed": str(removed)})


@router.get("/cards/{card_id}/summary", response_model=CardSummaryOut)
def get_card_summary(
    card_id: str,
    cards: CardRepository = Depends(get_card_repository),
    transactions: TransactionRepository = Depends(get_transaction_repository),
    today: date = Depends(get_today),
    private: bool = Query(False, description="Mask amounts in the display strings"),
):
    """
    Limit usage and invoice status for a card.

    Returns:
        Used/available limit, usage percentage with high-usage flag, and
        whether the current invoice is still open
    """
    try:
        card = cards.get(card_id)
    except CardNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    usage = card_usage(
        card,
        transactions.list(card_id=card_id),
        high_usage_threshold=settings.high_usage_threshold_percent,
    )
    status = invoice_status(card.closing_day, today)
    logging.debug("Card summary", extra={"card_id": card_id, "usage_percent": usage.usage_percent})

    return CardSummaryOut.from_domain(
        usage,
        status,
        used_display=format_currency(usage.used, private=private, symbol=settings.currency_symbol),
        available_display=format_currency(usage.available, private=private, symbol=settings.currency_symbol),
    )
