"""Credit scoring configuration with sensible defaults.

All sections are frozen so a config can be shared across concurrent scoring
calls; derive variants with ``dataclasses.replace``.
"""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType

from riskdesk.shared.models import KYCStatus


@dataclass(frozen=True)
class ScoringWeights:
    income: float = 0.20
    repayment_history: float = 0.30
    account_age: float = 0.15
    transaction_activity: float = 0.10
    debt_to_income: float = 0.15
    kyc_status: float = 0.10

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Scoring weight '{f.name}' must be non-negative")
        total = self.total()
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.6f}")

    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class IncomeBands:
    floor: float = 20_000.0
    ceiling: float = 200_000.0
    strong: float = 80_000.0
    moderate: float = 50_000.0
    positive_impact: float = 60_000.0
    neutral_impact: float = 40_000.0


@dataclass(frozen=True)
class RepaymentBands:
    excellent: float = 90.0
    good: float = 75.0
    positive_impact: float = 85.0
    neutral_impact: float = 70.0


@dataclass(frozen=True)
class AccountAgeBands:
    ceiling_months: int = 60
    established_months: int = 24
    developing_months: int = 12


@dataclass(frozen=True)
class ActivityBands:
    lookback_days: int = 30
    ceiling: int = 30
    active: int = 15
    moderate: int = 5
    positive_impact: int = 10
    neutral_impact: int = 5


@dataclass(frozen=True)
class DebtRatioBands:
    low: float = 0.2
    moderate: float = 0.4
    positive_impact: float = 0.3
    neutral_impact: float = 0.5
    # Used when income is zero and no ratio exists
    fallback_score: float = 50.0


@dataclass(frozen=True)
class BucketThresholds:
    excellent: int = 80
    good: int = 65
    fair: int = 50


def _default_kyc_scores() -> Mapping[KYCStatus, float]:
    return MappingProxyType(
        {
            KYCStatus.VERIFIED: 100.0,
            KYCStatus.PENDING: 60.0,
            KYCStatus.FAILED: 20.0,
            KYCStatus.NOT_STARTED: 0.0,
        }
    )


@dataclass(frozen=True)
class ScoringConfig:
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    income: IncomeBands = field(default_factory=IncomeBands)
    repayment: RepaymentBands = field(default_factory=RepaymentBands)
    account_age: AccountAgeBands = field(default_factory=AccountAgeBands)
    activity: ActivityBands = field(default_factory=ActivityBands)
    debt_ratio: DebtRatioBands = field(default_factory=DebtRatioBands)
    buckets: BucketThresholds = field(default_factory=BucketThresholds)
    # Read-only proxy; excluded from the generated hash
    kyc_scores: Mapping[KYCStatus, float] = field(default_factory=_default_kyc_scores, hash=False)

    def __post_init__(self) -> None:
        missing = set(KYCStatus) - set(self.kyc_scores)
        if missing:
            raise ValueError(f"kyc_scores missing statuses: {sorted(missing)}")
        if not isinstance(self.kyc_scores, MappingProxyType):
            object.__setattr__(self, "kyc_scores", MappingProxyType(dict(self.kyc_scores)))

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        """Load config with env var overrides. Env vars use CREDIT_ prefix."""
        weight_overrides = {}
        for f in fields(ScoringWeights):
            if v := os.getenv(f"CREDIT_WEIGHT_{f.name.upper()}"):
                weight_overrides[f.name] = float(v)

        activity_overrides = {}
        if v := os.getenv("CREDIT_ACTIVITY_LOOKBACK_DAYS"):
            activity_overrides["lookback_days"] = int(v)

        return cls(
            weights=replace(ScoringWeights(), **weight_overrides),
            activity=replace(ActivityBands(), **activity_overrides),
        )


# Module-level default instance
default_config = ScoringConfig()
