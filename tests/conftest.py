"""Shared test fixtures for riskdesk tests."""

from datetime import UTC, datetime, timedelta

import pytest

from riskdesk.shared.models import Customer, KYCStatus, Transaction

NOW = datetime(2026, 1, 15, 14, 0, 0, tzinfo=UTC)


def make_customer(**kwargs) -> Customer:
    defaults = {
        "id": "cust-1",
        "income": 75_000.0,
        "repayment_history": 82.0,
        "account_age": 18,
        "loan_balance": 15_000.0,
        "kyc_status": KYCStatus.VERIFIED,
        "documents_provided": ["passport", "utility_bill"],
    }
    defaults.update(kwargs)
    return Customer(**defaults)


def make_transaction(**kwargs) -> Transaction:
    defaults = {
        "id": "txn-1",
        "customer_id": "cust-1",
        "amount": 250.0,
        "timestamp": NOW,
    }
    defaults.update(kwargs)
    return Transaction(**defaults)


def make_history(
    count: int,
    customer_id: str = "cust-1",
    spacing: timedelta = timedelta(minutes=1),
    end: datetime = NOW,
) -> list[Transaction]:
    """``count`` transactions for one customer, newest at ``end``."""
    return [
        make_transaction(id=f"{customer_id}-txn-{i}", customer_id=customer_id, timestamp=end - spacing * i)
        for i in range(count)
    ]


@pytest.fixture
def customer() -> Customer:
    return make_customer()


@pytest.fixture
def transaction() -> Transaction:
    return make_transaction()


@pytest.fixture
def backend_customer_payload() -> dict:
    """Customer record as served by the REST backend (camelCase keys)."""
    return {
        "id": "cust-42",
        "firstName": "Marie",
        "lastName": "Joseph",
        "email": "marie.joseph@example.com",
        "country": "US",
        "kycStatus": "pending",
        "documentsProvided": ["passport", "passport", "drivers_license"],
        "createdAt": "2024-03-01T10:00:00Z",
        "income": 52_000,
        "employmentStatus": "employed",
        "loanBalance": 8_000,
        "repaymentHistory": 77,
        "accountAge": 22,
    }


@pytest.fixture
def backend_transaction_payload() -> dict:
    return {
        "id": "txn-42",
        "customerId": "cust-42",
        "type": "transfer",
        "amount": 1_250.5,
        "currency": "USD",
        "timestamp": "2026-01-15T13:30:00",
        "status": "completed",
        "description": "Wire to supplier",
        "counterpartyCountry": "HT",
    }
