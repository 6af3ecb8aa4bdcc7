"""Pydantic models for the compliance domain."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import model_validator

from riskdesk.shared.models import DomainModel


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


SEVERITY_RANK = {
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
    Severity.CRITICAL: 4,
}


class AuditResult(StrEnum):
    PASS = "pass"
    FAIL = "fail"  # reserved for external reviewers; rule evaluation only flags
    FLAG = "flag"


class RuleResult(DomainModel):
    rule_id: str
    rule_name: str
    passed: bool
    details: str = ""
    severity: Severity | None = None

    @model_validator(mode="after")
    def _severity_only_on_failure(self) -> "RuleResult":
        if self.passed and self.severity is not None:
            raise ValueError(f"{self.rule_id}: a passed result carries no severity")
        if not self.passed and self.severity is None:
            raise ValueError(f"{self.rule_id}: a failed result requires a severity")
        return self


class AuditLog(DomainModel):
    id: str
    timestamp: datetime
    rule_id: str
    rule_name: str
    customer_id: str
    transaction_id: str | None = None
    result: AuditResult
    details: str
    metadata: dict[str, Any] | None = None


class RuleSummary(DomainModel):
    total: int = 0
    passed: int = 0
    failed: int = 0
    failed_rule_ids: tuple[str, ...] = ()
    highest_severity: Severity | None = None
