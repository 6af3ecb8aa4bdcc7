"""Audit log synthesis from rule results."""

import uuid
from collections.abc import Iterable
from datetime import datetime
from typing import Any

import structlog

from riskdesk.shared.helpers import resolve_now

from .models import AuditLog, AuditResult, RuleResult

logger = structlog.get_logger()


def audit_result_for(result: RuleResult) -> AuditResult:
    """Passed rules audit as ``pass``; failed rules are ``flag``ged for review.

    ``AuditResult.FAIL`` is set by reviewers downstream, never here.
    """
    return AuditResult.PASS if result.passed else AuditResult.FLAG


def create_audit_log(
    result: RuleResult,
    customer_id: str,
    transaction_id: str | None = None,
    metadata: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> AuditLog:
    """Build an immutable audit record for one rule result."""
    audit = AuditLog(
        id=f"log_{uuid.uuid4().hex}",
        timestamp=resolve_now(now),
        rule_id=result.rule_id,
        rule_name=result.rule_name,
        customer_id=customer_id,
        transaction_id=transaction_id,
        result=audit_result_for(result),
        details=result.details,
        metadata=metadata,
    )

    logger.debug(
        "audit_log_created",
        audit_id=audit.id,
        rule_id=audit.rule_id,
        customer_id=customer_id,
        transaction_id=transaction_id,
        result=audit.result.value,
    )
    return audit


def create_audit_logs(
    results: Iterable[RuleResult],
    customer_id: str,
    transaction_id: str | None = None,
    now: datetime | None = None,
) -> list[AuditLog]:
    """One audit record per result, all stamped with the same timestamp."""
    now = resolve_now(now)
    return [
        create_audit_log(r, customer_id, transaction_id=transaction_id, now=now) for r in results
    ]
