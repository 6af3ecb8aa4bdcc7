"""Compliance rule catalog.

Exports ALL_RULES (every catalog rule in id order), the bundles the engine
runs, and individual rule classes for direct use.
"""

from .amount import IncomeRatioRule, LargeTransactionRule, income_ratio
from .base import ComplianceRule, RuleContext
from .customer import AccountAgeRule, KYCDocumentRule
from .geo import BlacklistedCountryRule
from .velocity import TransactionVelocityRule

ALL_RULES: list[ComplianceRule] = [
    LargeTransactionRule(),
    TransactionVelocityRule(),
    BlacklistedCountryRule(),
    KYCDocumentRule(),
    AccountAgeRule(),
    IncomeRatioRule(),
]

RULES_BY_ID: dict[str, ComplianceRule] = {rule.rule_id: rule for rule in ALL_RULES}

# RULE_004 is evaluated per customer and is not part of the transaction bundle.
TRANSACTION_RULE_IDS: tuple[str, ...] = ("RULE_001", "RULE_002", "RULE_003", "RULE_005", "RULE_006")
CUSTOMER_RULE_IDS: tuple[str, ...] = ("RULE_004", "RULE_005")

__all__ = [
    "ALL_RULES",
    "CUSTOMER_RULE_IDS",
    "ComplianceRule",
    "RULES_BY_ID",
    "RuleContext",
    "TRANSACTION_RULE_IDS",
    "income_ratio",
    # Amount
    "LargeTransactionRule",
    "IncomeRatioRule",
    # Velocity
    "TransactionVelocityRule",
    # Geo
    "BlacklistedCountryRule",
    # Customer
    "KYCDocumentRule",
    "AccountAgeRule",
]
