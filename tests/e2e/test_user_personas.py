"""
E2E journeys for typical card holders, driven entirely through the HTTP API.

The clock is fixed at 2024-01-15, so month 0 of every projection is January 2024.

User personas:
- installment_buyer: splits big purchases, checks when each installment lands
- subscriber: several recurring charges on a card closing late in the month
- multi_card: spreads spending across cards and drills into a single month
- card_cleanup: removes a card and expects its charges to disappear
"""

import pytest
from fastapi.testclient import TestClient


def _card(client: TestClient, name: str, closing_day: int, due_day: int, limit: float = 3000) -> str:
    response = client.post(
        "/v1/cards",
        json={"name": name, "total_limit": limit, "closing_day": closing_day, "due_day": due_day},
    )
    assert response.status_code == 201
    return response.json()["id"]


def _buy(client: TestClient, card_id: str, description: str, value: float, on: str, installments: int = 1, recurring: bool = False) -> str:
    response = client.post(
        "/v1/transactions",
        json={
            "description": description,
            "value": value,
            "date": on,
            "card_id": card_id,
            "installments": installments,
            "is_recurring": recurring,
        },
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.integration
def test_installment_buyer_sees_each_installment(client: TestClient):
    """
    installment_buyer: 1200 in 12x on Jan 3, card closing on the 10th
    Expected: 100/month from January through December, nothing beyond
    """
    card = _card(client, "Inter", closing_day=10, due_day=17)
    _buy(client, card, "Notebook", 1200, "2024-01-03", installments=12)

    months = client.get("/v1/projection").json()["months"]

    assert all(m["total"] == 100.0 for m in months)
    december = client.get("/v1/projection/details", params={"month": "2024-12"}).json()
    assert december["items"][0]["installment_number"] == 12
    assert client.get("/v1/projection/details", params={"month": "2025-01"}).json()["items"] == []


@pytest.mark.integration
def test_subscriber_recurring_charges(client: TestClient):
    """
    subscriber: two subscriptions on a card closing on the 28th
    Expected: each bills from its first statement onward, never stops
    """
    card = _card(client, "C6", closing_day=28, due_day=5)
    _buy(client, card, "Streaming", 55.9, "2023-08-30", recurring=True)  # after closing → Sep 2023
    _buy(client, card, "Academia", 119.9, "2024-01-28", recurring=True)  # on closing → Feb 2024

    totals = [m["total"] for m in client.get("/v1/projection").json()["months"]]

    assert totals[0] == 55.9
    assert all(t == 175.8 for t in totals[1:])


@pytest.mark.integration
def test_multi_card_month_drilldown(client: TestClient):
    """
    multi_card: purchases on two cards with different closing days
    Expected: per-card totals and details agree for every month
    """
    early = _card(client, "Nubank", closing_day=3, due_day=10)
    late = _card(client, "Itaú", closing_day=25, due_day=2)
    _buy(client, early, "Mercado", 450, "2024-01-14")
    _buy(client, late, "Mercado", 450, "2024-01-14")
    _buy(client, late, "Passagem", 1000, "2024-01-26", installments=4)

    months = client.get("/v1/projection").json()["months"]
    january, february = months[0], months[1]

    assert january["per_card"] == {early: 0.0, late: 450.0}
    assert february["per_card"] == {early: 450.0, late: 250.0}

    for month in months:
        details = client.get("/v1/projection/details", params={"month": month["month"]}).json()
        assert details["total"] == month["total"]
        values = [i["value"] for i in details["items"]]
        assert values == sorted(values, reverse=True)


@pytest.mark.integration
def test_card_cleanup_removes_charges(client: TestClient):
    """
    card_cleanup: deleting a card drops all of its transactions
    Expected: the projection no longer bills anything for it
    """
    keep = _card(client, "Santander", closing_day=5, due_day=12)
    drop = _card(client, "Antigo", closing_day=5, due_day=12)
    _buy(client, keep, "Farmácia", 60, "2024-01-08")
    _buy(client, drop, "Celular", 2400, "2024-01-08", installments=10)

    assert client.get("/v1/projection").json()["months"][1]["total"] == 300.0

    assert client.delete(f"/v1/cards/{drop}").status_code == 204

    months = client.get("/v1/projection").json()["months"]
    assert months[1]["total"] == 60.0
    assert drop not in months[1]["per_card"]
    assert [t["card_id"] for t in client.get("/v1/transactions").json()] == [keep]
