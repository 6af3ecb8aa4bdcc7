"""Customer-level KYC rules."""

from ..config import RuleConfig
from ..models import RuleResult, Severity
from .base import ComplianceRule, RuleContext


class KYCDocumentRule(ComplianceRule):
    """Fails when any required KYC document is missing."""

    rule_id = "RULE_004"
    rule_name = "KYC Document Verification"

    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        provided = context.require_customer(self.rule_id).documents_provided
        missing = [doc for doc in config.kyc.required_documents if doc not in provided]

        if not missing:
            return self._passed("All required documents provided")

        return self._failed(
            f"Missing required documents: {', '.join(missing)}",
            Severity.MEDIUM,
        )


class AccountAgeRule(ComplianceRule):
    """Fails for accounts younger than the minimum age in months."""

    rule_id = "RULE_005"
    rule_name = "Account Age Verification"

    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        age = context.require_customer(self.rule_id).account_age
        min_months = config.kyc.min_account_age_months

        if age >= min_months:
            return self._passed(f"Account age {age} months meets minimum requirement")

        return self._failed(
            f"Account age {age} months below minimum of {min_months} months",
            Severity.LOW,
        )
