"""Unit tests for the in-memory card and transaction repositories"""

import pytest
from dataclasses import replace
from datetime import date
from decimal import Decimal
from intellicard.domain.exceptions import (
    CardNotFoundError,
    TransactionNotFoundError,
    UnknownCardReferenceError,
)
from intellicard.domain.models import Transaction
from intellicard.infrastructure.store.repositories import CardRepository, TransactionRepository


@pytest.fixture
def cards(store) -> CardRepository:
    return CardRepository(store)


@pytest.fixture
def transactions(store) -> TransactionRepository:
    return TransactionRepository(store)


def test_save_card_generates_id(cards, card_a):
    saved = cards.save(replace(card_a, id=""))
    assert saved.id
    assert cards.get(saved.id).name == "Nubank"


def test_save_card_replaces_in_place(cards, card_a, card_b):
    cards.save(card_a)
    cards.save(card_b)
    cards.save(replace(card_a, name="Nubank Ultravioleta"))

    assert [c.id for c in cards.list()] == ["card_a", "card_b"]
    assert cards.get("card_a").name == "Nubank Ultravioleta"


def test_get_missing_card_raises(cards):
    with pytest.raises(CardNotFoundError):
        cards.get("nope")


def test_delete_card_cascades_to_transactions(cards, transactions, card_a, card_b):
    cards.save(card_a)
    cards.save(card_b)
    transactions.save(Transaction("1", "TV", Decimal("300"), date(2024, 1, 10), "card_a", installments=3))
    transactions.save(Transaction("2", "Café", Decimal("12"), date(2024, 1, 11), "card_a"))
    transactions.save(Transaction("3", "Mercado", Decimal("80"), date(2024, 1, 12), "card_b"))

    removed = cards.delete("card_a")

    assert removed == 2
    assert [t.id for t in transactions.list()] == ["3"]
    with pytest.raises(CardNotFoundError):
        cards.delete("card_a")


def test_transaction_requires_registered_card(transactions):
    with pytest.raises(UnknownCardReferenceError):
        transactions.save(Transaction("1", "TV", Decimal("300"), date(2024, 1, 10), "card_x"))


def test_recurring_transaction_stored_with_single_installment(cards, transactions, card_a):
    cards.save(card_a)
    saved = transactions.save(
        Transaction("", "Academia", Decimal("99"), date(2024, 1, 1), "card_a", installments=6, is_recurring=True)
    )

    assert saved.id
    assert transactions.get(saved.id).installments == 1


def test_list_transactions_filters_and_sorts(cards, transactions, card_a, card_b):
    cards.save(card_a)
    cards.save(card_b)
    transactions.save(Transaction("1", "Mercado Extra", Decimal("80"), date(2024, 1, 3), "card_a"))
    transactions.save(Transaction("2", "Farmácia", Decimal("25"), date(2024, 1, 9), "card_a"))
    transactions.save(Transaction("3", "mercado livre", Decimal("150"), date(2024, 1, 6), "card_b"))

    assert [t.id for t in transactions.list()] == ["2", "3", "1"]
    assert [t.id for t in transactions.list(card_id="card_a")] == ["2", "1"]
    assert [t.id for t in transactions.list(search="MERCADO")] == ["3", "1"]
    assert [t.id for t in transactions.list(card_id="card_b", search="mercado")] == ["3"]


def test_delete_missing_transaction_raises(transactions):
    with pytest.raises(TransactionNotFoundError):
        transactions.delete("nope")


def test_snapshot_returns_immutable_tuples(store, cards, transactions, card_a):
    cards.save(card_a)
    transactions.save(Transaction("1", "Café", Decimal("12"), date(2024, 1, 11), "card_a"))

    snap_cards, snap_transactions = store.snapshot()
    cards.delete("card_a")

    assert snap_cards == (card_a,)
    assert len(snap_transactions) == 1
