"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from intellicard.api.main import create_app
from intellicard.api.dependencies import get_today
from intellicard.domain.models import Card, Transaction
from intellicard.infrastructure.store.wallet import WalletStore, get_store


# Fixed clock: month 0 of every API projection is January 2024
TODAY = date(2024, 1, 15)


@pytest.fixture
def store() -> WalletStore:
    """Empty wallet per test"""
    return WalletStore()


@pytest.fixture
def client(store: WalletStore) -> TestClient:
    """Create FastAPI test client with an isolated wallet and fixed clock"""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)


@pytest.fixture
def card_a() -> Card:
    """Closes on the 5th, due on the 10th"""
    return Card(
        id="card_a",
        name="Nubank",
        total_limit=Decimal("1000"),
        closing_day=5,
        due_day=10,
        color="purple",
    )


@pytest.fixture
def card_b() -> Card:
    """Closes on the 25th, due on the 5th of the following cycle"""
    return Card(
        id="card_b",
        name="Itaú",
        total_limit=Decimal("5000"),
        closing_day=25,
        due_day=5,
        color="orange",
    )


@pytest.fixture
def mixed_transactions() -> list[Transaction]:
    """Installments, a subscription and an orphan spread over both cards"""
    return [
        Transaction("t_tv", "TV", Decimal("300"), date(2024, 1, 10), "card_a", installments=3),
        Transaction(
            "t_stream", "Streaming", Decimal("39.90"), date(2024, 3, 1), "card_a", is_recurring=True
        ),
        Transaction("t_sofa", "Sofá", Decimal("1000"), date(2023, 12, 26), "card_b", installments=10),
        Transaction("t_shoes", "Tênis", Decimal("100"), date(2024, 1, 20), "card_b", installments=3),
        Transaction("t_ghost", "Cartão removido", Decimal("500"), date(2024, 1, 2), "card_gone"),
    ]
