"""Amount-based compliance rules."""

import math

from riskdesk.shared.helpers import format_money, format_percent

from ..config import RuleConfig
from ..models import RuleResult, Severity
from .base import ComplianceRule, RuleContext


def income_ratio(amount: float, annual_income: float) -> float:
    """Share of monthly income a transaction represents; inf when there is none."""
    monthly_income = annual_income / 12
    if monthly_income <= 0:
        return 0.0 if amount <= 0 else math.inf
    return amount / monthly_income


class LargeTransactionRule(ComplianceRule):
    """Fails for single transactions above the large-transaction threshold."""

    rule_id = "RULE_001"
    rule_name = "Large Transaction Threshold"

    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        amount = context.require_transaction(self.rule_id).amount
        threshold = config.amount.large_txn_threshold

        if amount <= threshold:
            return self._passed(f"Transaction amount {format_money(amount)} within threshold")

        severity = (
            Severity.CRITICAL
            if amount > threshold * config.amount.large_txn_critical_multiplier
            else Severity.HIGH
        )
        return self._failed(
            f"Transaction amount {format_money(amount)} exceeds threshold of "
            f"{format_money(threshold)}",
            severity,
        )


class IncomeRatioRule(ComplianceRule):
    """Fails when a transaction is too large relative to monthly income."""

    rule_id = "RULE_006"
    rule_name = "Income Ratio Check"

    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        amount = context.require_transaction(self.rule_id).amount
        income = context.require_customer(self.rule_id).income
        max_ratio = config.amount.max_income_ratio
        limit = f"{max_ratio * 100:g}%"

        ratio = income_ratio(amount, income)
        if ratio <= max_ratio:
            return self._passed(
                f"Transaction is {format_percent(ratio)} of monthly income (within limit)"
            )

        severity = (
            Severity.HIGH
            if ratio > max_ratio * config.amount.income_ratio_high_multiplier
            else Severity.MEDIUM
        )

        if math.isinf(ratio):
            return self._failed(
                f"Transaction amount {format_money(amount)} against no declared "
                f"monthly income (exceeds {limit} threshold)",
                severity,
            )
        return self._failed(
            f"Transaction is {format_percent(ratio)} of monthly income (exceeds {limit} threshold)",
            severity,
        )
