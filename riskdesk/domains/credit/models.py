"""Pydantic models for the credit scoring domain."""

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from riskdesk.shared.models import DomainModel


class Impact(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class CreditBucket(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ScoreFactor(DomainModel):
    name: str
    impact: Impact
    weight: float = Field(ge=0.0, le=1.0)
    value: float = Field(ge=0.0, le=100.0)
    description: str


class CreditScore(DomainModel):
    customer_id: str
    score: int = Field(ge=0, le=100)
    bucket: CreditBucket
    factors: tuple[ScoreFactor, ...]
    calculated_at: datetime
