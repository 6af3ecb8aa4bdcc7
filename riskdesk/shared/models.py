"""Customer and transaction snapshots consumed by the scoring and rule engines.

Records arrive from the REST backend with camelCase keys; both camelCase and
snake_case names are accepted. Every model is frozen once constructed.
"""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .helpers import as_utc


class DomainModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class KYCStatus(StrEnum):
    VERIFIED = "verified"
    PENDING = "pending"
    FAILED = "failed"
    NOT_STARTED = "not_started"


class Customer(DomainModel):
    id: str
    income: float = 0.0
    repayment_history: float = 0.0  # 0-100, computed upstream
    account_age: int = 0  # whole months
    loan_balance: float = 0.0
    kyc_status: KYCStatus = KYCStatus.NOT_STARTED
    documents_provided: frozenset[str] = frozenset()

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    country: str | None = None
    employment_status: str | None = None

    @field_validator(
        "income",
        "repayment_history",
        "account_age",
        "loan_balance",
        "kyc_status",
        "documents_provided",
        mode="before",
    )
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Transaction(DomainModel):
    id: str
    customer_id: str
    amount: float
    timestamp: datetime
    counterparty_country: str | None = None

    type: str | None = None
    currency: str = "USD"
    status: str | None = None
    description: str | None = None

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
