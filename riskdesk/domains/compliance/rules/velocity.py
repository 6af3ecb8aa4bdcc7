"""Velocity-based compliance rules."""

from datetime import timedelta

from riskdesk.shared.helpers import count_since

from ..config import RuleConfig
from ..models import RuleResult, Severity
from .base import ComplianceRule, RuleContext


class TransactionVelocityRule(ComplianceRule):
    """Fails when a customer's transaction count in the trailing window is too high."""

    rule_id = "RULE_002"
    rule_name = "Rapid Transaction Velocity"

    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        customer_id = context.require_customer_id(self.rule_id)
        window_minutes = config.velocity.window_minutes
        max_transactions = config.velocity.max_transactions

        window_start = context.now - timedelta(minutes=window_minutes)
        count = count_since(context.transactions, customer_id, window_start)

        if count <= max_transactions:
            return self._passed(
                f"{count} transactions in {window_minutes}-minute window (within limit)"
            )

        severity = (
            Severity.CRITICAL
            if count > max_transactions * config.velocity.critical_multiplier
            else Severity.HIGH
        )
        return self._failed(
            f"{count} transactions detected within {window_minutes}-minute window",
            severity,
        )
