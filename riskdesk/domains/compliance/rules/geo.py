"""Geography-based compliance rules."""

from ..config import RuleConfig
from ..models import RuleResult, Severity
from .base import ComplianceRule, RuleContext


class BlacklistedCountryRule(ComplianceRule):
    """Fails when the counterparty sits in a restricted jurisdiction.

    A transaction without a counterparty country is not evaluated and passes.
    """

    rule_id = "RULE_003"
    rule_name = "Blacklisted Country Check"

    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        country = context.require_transaction(self.rule_id).counterparty_country

        if not country or not config.geo.is_restricted(country):
            return self._passed("Transaction does not involve restricted jurisdictions")

        return self._failed(
            f"Transaction involves restricted jurisdiction: {country}",
            Severity.CRITICAL,
        )
