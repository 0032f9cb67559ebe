"""Pytest fixtures for testing"""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from household_billing.api.dependencies import get_today
from household_billing.api.main import create_app
from household_billing.domain.models import Card, Payer, Purchase

# Default horizon for this anchor: 2024-01 .. 2025-12
FIXED_TODAY = date(2024, 6, 15)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a fixed clock"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    return TestClient(app)


@pytest.fixture
def cards() -> list[Card]:
    """Two cards with different closing days"""
    return [
        Card(id="master", closing_day=18, name="Mastercard", due_day=27),
        Card(id="nubank", closing_day=5, name="Nubank", due_day=12),
    ]


@pytest.fixture
def sample_purchases() -> list[Purchase]:
    """Household purchases covering single, long and rolled-over installments"""
    return [
        Purchase(
            id="1",
            description="iPhone 15 Pro",
            location="Apple Store",
            purchase_date="2023-11-15",
            total_amount=Decimal("7200"),
            installment_count=12,
            payer=Payer.partner_a(),
            card_reference="master",
        ),
        Purchase(
            id="2",
            description="Anniversary dinner",
            location="Coco Bambu",
            purchase_date="2024-05-10",
            total_amount=Decimal("450.00"),
            installment_count=1,
            payer=Payer.shared(),
            card_reference="master",
        ),
        Purchase(
            id="3",
            description="Monthly groceries",
            location="Carrefour",
            purchase_date="2024-05-02",
            total_amount=Decimal("850.50"),
            installment_count=1,
            payer=Payer.shared(),
            card_reference="nubank",
        ),
        Purchase(
            id="4",
            description="Running shoes",
            location="Centauro",
            purchase_date="2024-04-20",
            total_amount=Decimal("600.00"),
            installment_count=4,
            payer=Payer.partner_b(),
            card_reference="master",
        ),
    ]
