"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Depends, Request

from intellicard.infrastructure.store.repositories import CardRepository, TransactionRepository
from intellicard.infrastructure.store.wallet import WalletStore, get_store


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Wall clock anchoring month 0 of the projection (overridden in tests)"""
    return date.today()


def get_card_repository(store: WalletStore = Depends(get_store)) -> CardRepository:
    return CardRepository(store)


def get_transaction_repository(store: WalletStore = Depends(get_store)) -> TransactionRepository:
    return TransactionRepository(store)
