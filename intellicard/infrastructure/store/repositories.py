"""Data access layer for cards and transactions"""

import logging
import uuid
from dataclasses import replace
from typing import List, Optional

from intellicard.domain.exceptions import (
    CardNotFoundError,
    TransactionNotFoundError,
    UnknownCardReferenceError,
)
from intellicard.domain.models import Card, Transaction
from intellicard.infrastructure.store.wallet import WalletStore

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


class CardRepository:
    """Repository for credit cards"""

    def __init__(self, store: WalletStore):
        self.store = store

    def save(self, card: Card) -> Card:
        """Insert a new card or replace the one with the same id in place"""
        if not card.id:
            card = replace(card, id=new_id())
        with self.store.lock:
            created = card.id not in self.store.cards
            self.store.cards[card.id] = card
        logger.info("Card saved", extra={"card_id": card.id, "is_new": created})
        return card

    def get(self, card_id: str) -> Card:
        card = self.store.cards.get(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    def list(self) -> List[Card]:
        with self.store.lock:
            return list(self.store.cards.values())

    def delete(self, card_id: str) -> int:
        """
        Delete a card and every transaction charged to it.

        Returns:
            Number of transactions removed with the card
        """
        with self.store.lock:
            if card_id not in self.store.cards:
                raise CardNotFoundError(card_id)
            del self.store.cards[card_id]

            orphaned = [tid for tid, t in self.store.transactions.items() if t.card_id == card_id]
            for tid in orphaned:
                del self.store.transactions[tid]

        logger.info(
            "Card deleted",
            extra={"card_id": card_id, "transactions_removed": len(orphaned)},
        )
        return len(orphaned)


class TransactionRepository:
    """Repository for card transactions"""

    def __init__(self, store: WalletStore):
        self.store = store

    def save(self, transaction: Transaction) -> Transaction:
        """
        Insert or replace a transaction.

        Recurring charges are stored with a single installment. The card must
        already be registered.
        """
        if not transaction.id:
            transaction = replace(transaction, id=new_id())
        if transaction.is_recurring and transaction.installments != 1:
            transaction = replace(transaction, installments=1)

        with self.store.lock:
            if transaction.card_id not in self.store.cards:
                raise UnknownCardReferenceError(
                    f"Card {transaction.card_id} is not registered"
                )
            created = transaction.id not in self.store.transactions
            self.store.transactions[transaction.id] = transaction

        logger.info(
            "Transaction saved",
            extra={"transaction_id": transaction.id, "card_id": transaction.card_id, "is_new": created},
        )
        return transaction

    def get(self, transaction_id: str) -> Transaction:
        transaction = self.store.transactions.get(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction

    def list(self, card_id: Optional[str] = None, search: str = "") -> List[Transaction]:
        """Transactions filtered by card and description text, newest first"""
        needle = search.lower()
        with self.store.lock:
            rows = list(self.store.transactions.values())

        rows = [
            t for t in rows
            if (not card_id or t.card_id == card_id) and needle in t.description.lower()
        ]
        return sorted(rows, key=lambda t: t.date, reverse=True)

    def delete(self, transaction_id: str) -> None:
        with self.store.lock:
            if transaction_id not in self.store.transactions:
                raise TransactionNotFoundError(transaction_id)
            del self.store.transactions[transaction_id]
        logger.info("Transaction deleted", extra={"transaction_id": transaction_id})
