"""In-memory wallet holding the user's cards and transactions"""

import threading
from typing import Dict, Tuple

from intellicard.domain.models import Card, Transaction


class WalletStore:
    """Insertion-ordered card and transaction collections guarded by a lock"""

    def __init__(self):
        self.lock = threading.Lock()
        self.cards: Dict[str, Card] = {}
        self.transactions: Dict[str, Transaction] = {}

    def snapshot(self) -> Tuple[Tuple[Card, ...], Tuple[Transaction, ...]]:
        """Immutable copy of both collections for projection"""
        with self.lock:
            return tuple(self.cards.values()), tuple(self.transactions.values())

    def clear(self) -> None:
        with self.lock:
            self.cards.clear()
            self.transactions.clear()


_store = WalletStore()


def get_store() -> WalletStore:
    """Dependency injection for the process-wide wallet"""
    return _store
