"""Compliance rule configuration.

Every threshold the rule catalog uses lives here. Sections are frozen; the
per-rule ``check_*`` helpers derive overridden copies with
``dataclasses.replace`` rather than mutating a shared instance.
"""

import os
from dataclasses import dataclass, field

# FATF "call for action" jurisdictions plus comprehensively sanctioned
# countries, as ISO 3166-1 alpha-2 codes.
DEFAULT_BLACKLISTED_COUNTRIES: frozenset[str] = frozenset({"KP", "IR", "MM", "SY", "CU"})


@dataclass(frozen=True)
class AmountThresholds:
    """RULE_001 and RULE_006."""

    large_txn_threshold: float = 10_000.0
    large_txn_critical_multiplier: float = 5.0
    max_income_ratio: float = 0.5
    income_ratio_high_multiplier: float = 2.0


@dataclass(frozen=True)
class VelocityThresholds:
    """RULE_002."""

    window_minutes: int = 60
    max_transactions: int = 5
    critical_multiplier: int = 2


@dataclass(frozen=True)
class GeoRestrictions:
    """RULE_003. Country labels compare case-insensitively."""

    blacklisted_countries: frozenset[str] = DEFAULT_BLACKLISTED_COUNTRIES

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "blacklisted_countries",
            frozenset(c.strip().upper() for c in self.blacklisted_countries),
        )

    def is_restricted(self, country: str) -> bool:
        return country.strip().upper() in self.blacklisted_countries


@dataclass(frozen=True)
class KYCRequirements:
    """RULE_004 and RULE_005."""

    required_documents: tuple[str, ...] = ("passport", "utility_bill")
    min_account_age_months: int = 3

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_documents", tuple(self.required_documents))


@dataclass(frozen=True)
class RuleConfig:
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    geo: GeoRestrictions = field(default_factory=GeoRestrictions)
    kyc: KYCRequirements = field(default_factory=KYCRequirements)

    @classmethod
    def from_env(cls) -> "RuleConfig":
        """Load config with env var overrides. Env vars use RULES_ prefix."""
        amount = {}
        if v := os.getenv("RULES_LARGE_TXN_THRESHOLD"):
            amount["large_txn_threshold"] = float(v)
        if v := os.getenv("RULES_MAX_INCOME_RATIO"):
            amount["max_income_ratio"] = float(v)

        velocity = {}
        if v := os.getenv("RULES_VELOCITY_WINDOW_MINUTES"):
            velocity["window_minutes"] = int(v)
        if v := os.getenv("RULES_VELOCITY_MAX_TRANSACTIONS"):
            velocity["max_transactions"] = int(v)

        geo = {}
        if v := os.getenv("RULES_BLACKLISTED_COUNTRIES"):
            geo["blacklisted_countries"] = frozenset(c for c in v.split(",") if c.strip())

        kyc = {}
        if v := os.getenv("RULES_REQUIRED_DOCUMENTS"):
            kyc["required_documents"] = tuple(d.strip() for d in v.split(",") if d.strip())
        if v := os.getenv("RULES_MIN_ACCOUNT_AGE_MONTHS"):
            kyc["min_account_age_months"] = int(v)

        return cls(
            amount=AmountThresholds(**amount),
            velocity=VelocityThresholds(**velocity),
            geo=GeoRestrictions(**geo),
            kyc=KYCRequirements(**kyc),
        )


# Module-level default instance
default_config = RuleConfig()
