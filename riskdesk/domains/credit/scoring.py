"""Deterministic credit scoring.

Computes a 0-100 creditworthiness score from six weighted factors:
  1. Annual income          (20%)
  2. Repayment history      (30%)
  3. Account age            (15%)
  4. Transaction activity   (10%)
  5. Debt-to-income ratio   (15%)
  6. Identity verification  (10%)

Buckets:
  excellent  (80-100)
  good       (65-79)
  fair       (50-64)
  poor       (0-49)

Each factor is normalized onto 0-100 and saturates outside its range, so the
weighted sum can never leave [0, 100]. The final score rounds half up.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

import structlog

from riskdesk.shared.helpers import clamp, count_since, normalize, resolve_now, round_half_up
from riskdesk.shared.models import Customer, KYCStatus, Transaction

from .config import ScoringConfig, default_config
from .models import CreditBucket, CreditScore, Impact, ScoreFactor

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Individual factor scoring functions
# ---------------------------------------------------------------------------


def _score_income(income: float, config: ScoringConfig) -> ScoreFactor:
    bands = config.income
    value = normalize(income, bands.floor, bands.ceiling)

    if income >= bands.positive_impact:
        impact = Impact.POSITIVE
    elif income >= bands.neutral_impact:
        impact = Impact.NEUTRAL
    else:
        impact = Impact.NEGATIVE

    if income >= bands.strong:
        description = "Strong income level supports creditworthiness"
    elif income >= bands.moderate:
        description = "Moderate income level"
    else:
        description = "Lower income may impact credit capacity"

    return ScoreFactor(
        name="Annual Income",
        impact=impact,
        weight=config.weights.income,
        value=value,
        description=description,
    )


def _score_repayment(history: float, config: ScoringConfig) -> ScoreFactor:
    """Repayment history is already on the 0-100 scale; only clamp it."""
    bands = config.repayment
    value = clamp(history, 0.0, 100.0)

    if history >= bands.positive_impact:
        impact = Impact.POSITIVE
    elif history >= bands.neutral_impact:
        impact = Impact.NEUTRAL
    else:
        impact = Impact.NEGATIVE

    if history >= bands.excellent:
        description = "Excellent payment track record"
    elif history >= bands.good:
        description = "Good payment history with minor issues"
    else:
        description = "Payment history needs improvement"

    return ScoreFactor(
        name="Repayment History",
        impact=impact,
        weight=config.weights.repayment_history,
        value=value,
        description=description,
    )


def _score_account_age(months: int, config: ScoringConfig) -> ScoreFactor:
    bands = config.account_age
    value = normalize(months, 0, bands.ceiling_months)

    if months >= bands.established_months:
        impact = Impact.POSITIVE
        description = "Well-established account relationship"
    elif months >= bands.developing_months:
        impact = Impact.NEUTRAL
        description = "Developing account history"
    else:
        impact = Impact.NEGATIVE
        description = "New account with limited history"

    return ScoreFactor(
        name="Account Age",
        impact=impact,
        weight=config.weights.account_age,
        value=value,
        description=description,
    )


def _score_transaction_activity(
    transactions: Iterable[Transaction],
    customer_id: str,
    now: datetime,
    config: ScoringConfig,
) -> ScoreFactor:
    bands = config.activity
    since = now - timedelta(days=bands.lookback_days)
    frequency = count_since(transactions, customer_id, since)
    value = normalize(frequency, 0, bands.ceiling)

    if frequency >= bands.positive_impact:
        impact = Impact.POSITIVE
    elif frequency >= bands.neutral_impact:
        impact = Impact.NEUTRAL
    else:
        impact = Impact.NEGATIVE

    if frequency >= bands.active:
        description = "Active account usage demonstrates engagement"
    elif frequency >= bands.moderate:
        description = "Moderate account activity"
    else:
        description = "Limited recent transaction activity"

    return ScoreFactor(
        name="Transaction Activity",
        impact=impact,
        weight=config.weights.transaction_activity,
        value=value,
        description=description,
    )


def _score_debt_to_income(loan_balance: float, income: float, config: ScoringConfig) -> ScoreFactor:
    bands = config.debt_ratio
    weight = config.weights.debt_to_income

    # No income, no ratio
    if income <= 0:
        return ScoreFactor(
            name="Debt-to-Income Ratio",
            impact=Impact.NEUTRAL,
            weight=weight,
            value=bands.fallback_score,
            description="Unable to calculate ratio",
        )

    ratio = loan_balance / income
    value = clamp(1 - ratio, 0.0, 1.0) * 100

    if ratio <= bands.positive_impact:
        impact = Impact.POSITIVE
    elif ratio <= bands.neutral_impact:
        impact = Impact.NEUTRAL
    else:
        impact = Impact.NEGATIVE

    if ratio <= bands.low:
        description = "Low debt burden relative to income"
    elif ratio <= bands.moderate:
        description = "Moderate debt level"
    else:
        description = "High debt-to-income ratio"

    return ScoreFactor(
        name="Debt-to-Income Ratio",
        impact=impact,
        weight=weight,
        value=value,
        description=description,
    )


_KYC_NARRATIVE = {
    KYCStatus.VERIFIED: (Impact.POSITIVE, "Identity fully verified"),
    KYCStatus.PENDING: (Impact.NEUTRAL, "Verification in progress"),
    KYCStatus.FAILED: (Impact.NEGATIVE, "Identity verification required"),
    KYCStatus.NOT_STARTED: (Impact.NEGATIVE, "Identity verification required"),
}


def _score_kyc(status: KYCStatus, config: ScoringConfig) -> ScoreFactor:
    impact, description = _KYC_NARRATIVE[status]
    return ScoreFactor(
        name="Identity Verification",
        impact=impact,
        weight=config.weights.kyc_status,
        value=clamp(config.kyc_scores[status], 0.0, 100.0),
        description=description,
    )


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def classify_bucket(score: int, config: ScoringConfig = default_config) -> CreditBucket:
    thresholds = config.buckets
    if score >= thresholds.excellent:
        return CreditBucket.EXCELLENT
    if score >= thresholds.good:
        return CreditBucket.GOOD
    if score >= thresholds.fair:
        return CreditBucket.FAIR
    return CreditBucket.POOR


def combine_factors(factors: Iterable[ScoreFactor]) -> int:
    """Weighted sum of factor values, rounded half up into [0, 100]."""
    total = sum(f.value * f.weight for f in factors)
    return int(clamp(round_half_up(total), 0, 100))


def calculate_credit_score(
    customer: Customer,
    transactions: Iterable[Transaction],
    config: ScoringConfig = default_config,
    now: datetime | None = None,
) -> CreditScore:
    """Score one customer.

    ``now`` anchors the activity window and ``calculated_at``; the clock is
    read once when it is omitted. Factors come back in display order.
    """
    now = resolve_now(now)

    factors = (
        _score_income(customer.income, config),
        _score_repayment(customer.repayment_history, config),
        _score_account_age(customer.account_age, config),
        _score_transaction_activity(transactions, customer.id, now, config),
        _score_debt_to_income(customer.loan_balance, customer.income, config),
        _score_kyc(customer.kyc_status, config),
    )

    score = combine_factors(factors)
    bucket = classify_bucket(score, config)

    logger.info(
        "credit_score_calculated",
        customer_id=customer.id,
        score=score,
        bucket=bucket.value,
        negative_factors=[f.name for f in factors if f.impact == Impact.NEGATIVE],
    )

    return CreditScore(
        customer_id=customer.id,
        score=score,
        bucket=bucket,
        factors=factors,
        calculated_at=now,
    )


class CreditScoringEngine:
    """Holds a scoring config and scores customers against it."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or default_config

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def calculate(
        self,
        customer: Customer,
        transactions: Iterable[Transaction],
        now: datetime | None = None,
    ) -> CreditScore:
        return calculate_credit_score(customer, transactions, config=self._config, now=now)

    def calculate_many(
        self,
        customers: Iterable[Customer],
        transactions: Iterable[Transaction],
        now: datetime | None = None,
    ) -> list[CreditScore]:
        """Score a batch of customers against one shared reference time."""
        now = resolve_now(now)
        history = list(transactions)
        return [self.calculate(c, history, now=now) for c in customers]
