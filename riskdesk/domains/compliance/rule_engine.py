"""Compliance rule evaluation.

Two ways in:

* ``check_*`` functions evaluate a single catalog rule, taking the rule's
  knobs as optional keyword overrides of the active ``RuleConfig``.
* ``RuleEngine`` holds a config and runs the transaction bundle
  (RULE_001, 002, 003, 005, 006) or the customer bundle (RULE_004, 005).

Nothing here raises on a failed rule; every result is returned and the
caller decides what to do with failures.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import datetime

import structlog

from riskdesk.shared.helpers import resolve_now
from riskdesk.shared.models import Customer, Transaction

from .audit import create_audit_logs
from .config import RuleConfig, default_config
from .models import SEVERITY_RANK, AuditLog, RuleResult, RuleSummary, Severity
from .rules import CUSTOMER_RULE_IDS, RULES_BY_ID, TRANSACTION_RULE_IDS, RuleContext

logger = structlog.get_logger()


def _override(config: RuleConfig, section: str, **changes) -> RuleConfig:
    """Copy of ``config`` with non-None ``changes`` applied to one section."""
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        return config
    return replace(config, **{section: replace(getattr(config, section), **changes)})


def _as_names(values: Iterable[str] | None) -> tuple[str, ...] | None:
    """A bare string is one name, not a sequence of characters."""
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def _evaluate(rule_id: str, context: RuleContext, config: RuleConfig) -> RuleResult:
    result = RULES_BY_ID[rule_id].evaluate(context, config)
    if not result.passed:
        logger.debug(
            "rule_failed",
            rule_id=rule_id,
            severity=result.severity.value,
            details=result.details,
        )
    return result


# ---------------------------------------------------------------------------
# Single-rule checks
# ---------------------------------------------------------------------------


def check_large_transaction(
    transaction: Transaction,
    threshold: float | None = None,
    config: RuleConfig = default_config,
) -> RuleResult:
    """RULE_001. Default threshold 10,000."""
    cfg = _override(config, "amount", large_txn_threshold=threshold)
    return _evaluate("RULE_001", RuleContext(now=resolve_now(), transaction=transaction), cfg)


def check_transaction_velocity(
    transactions: Sequence[Transaction],
    customer_id: str,
    window_minutes: int | None = None,
    max_transactions: int | None = None,
    config: RuleConfig = default_config,
    now: datetime | None = None,
) -> RuleResult:
    """RULE_002. Default window 60 minutes, at most 5 transactions."""
    cfg = _override(
        config, "velocity", window_minutes=window_minutes, max_transactions=max_transactions
    )
    context = RuleContext(
        now=resolve_now(now),
        transactions=tuple(transactions),
        customer_id=customer_id,
    )
    return _evaluate("RULE_002", context, cfg)


def check_country_restriction(
    transaction: Transaction,
    blacklisted_countries: Iterable[str] | None = None,
    config: RuleConfig = default_config,
) -> RuleResult:
    """RULE_003 against the configured blacklist."""
    cfg = _override(
        config,
        "geo",
        blacklisted_countries=_as_names(blacklisted_countries),
    )
    return _evaluate("RULE_003", RuleContext(now=resolve_now(), transaction=transaction), cfg)


def check_kyc_documents(
    customer: Customer,
    required_docs: Iterable[str] | None = None,
    config: RuleConfig = default_config,
) -> RuleResult:
    """RULE_004. Default required documents: passport, utility_bill."""
    cfg = _override(
        config,
        "kyc",
        required_documents=_as_names(required_docs),
    )
    return _evaluate("RULE_004", RuleContext(now=resolve_now(), customer=customer), cfg)


def check_account_age(
    customer: Customer,
    min_months: int | None = None,
    config: RuleConfig = default_config,
) -> RuleResult:
    """RULE_005. Default minimum 3 months."""
    cfg = _override(config, "kyc", min_account_age_months=min_months)
    return _evaluate("RULE_005", RuleContext(now=resolve_now(), customer=customer), cfg)


def check_income_ratio(
    transaction: Transaction,
    customer: Customer,
    max_ratio: float | None = None,
    config: RuleConfig = default_config,
) -> RuleResult:
    """RULE_006. Default max ratio 0.5 of monthly income."""
    cfg = _override(config, "amount", max_income_ratio=max_ratio)
    context = RuleContext(now=resolve_now(), transaction=transaction, customer=customer)
    return _evaluate("RULE_006", context, cfg)


# ---------------------------------------------------------------------------
# Bundles
# ---------------------------------------------------------------------------


def run_all_transaction_rules(
    transaction: Transaction,
    customer: Customer,
    all_transactions: Sequence[Transaction],
    config: RuleConfig = default_config,
    now: datetime | None = None,
) -> list[RuleResult]:
    """Run RULE_001, 002, 003, 005 and 006 in that order.

    RULE_004 (KYC documents) is not part of this bundle; use
    ``run_customer_rules`` or ``check_kyc_documents`` for it.
    """
    context = RuleContext(
        now=resolve_now(now),
        transaction=transaction,
        customer=customer,
        transactions=tuple(all_transactions),
    )
    return [_evaluate(rule_id, context, config) for rule_id in TRANSACTION_RULE_IDS]


def run_customer_rules(
    customer: Customer,
    config: RuleConfig = default_config,
    now: datetime | None = None,
) -> list[RuleResult]:
    """Run the customer-level checks RULE_004 and RULE_005 in that order."""
    context = RuleContext(now=resolve_now(now), customer=customer)
    return [_evaluate(rule_id, context, config) for rule_id in CUSTOMER_RULE_IDS]


def highest_severity(results: Iterable[RuleResult]) -> Severity | None:
    severities = [r.severity for r in results if not r.passed and r.severity is not None]
    if not severities:
        return None
    return max(severities, key=SEVERITY_RANK.__getitem__)


def summarize_results(results: Sequence[RuleResult]) -> RuleSummary:
    failed = [r for r in results if not r.passed]
    return RuleSummary(
        total=len(results),
        passed=len(results) - len(failed),
        failed=len(failed),
        failed_rule_ids=tuple(r.rule_id for r in failed),
        highest_severity=highest_severity(failed),
    )


class RuleEngine:
    """Evaluates transactions and customers against the compliance catalog."""

    def __init__(self, config: RuleConfig | None = None) -> None:
        self._config = config or default_config
        logger.info(
            "rule_engine_initialized",
            transaction_rules=list(TRANSACTION_RULE_IDS),
            customer_rules=list(CUSTOMER_RULE_IDS),
        )

    @property
    def config(self) -> RuleConfig:
        return self._config

    def evaluate_transaction(
        self,
        transaction: Transaction,
        customer: Customer,
        all_transactions: Sequence[Transaction],
        now: datetime | None = None,
    ) -> list[RuleResult]:
        results = run_all_transaction_rules(
            transaction, customer, all_transactions, config=self._config, now=now
        )
        summary = summarize_results(results)
        logger.info(
            "transaction_rules_evaluated",
            transaction_id=transaction.id,
            customer_id=customer.id,
            failed_count=summary.failed,
            failed_rules=list(summary.failed_rule_ids),
            highest_severity=summary.highest_severity.value if summary.highest_severity else None,
        )
        return results

    def evaluate_customer(
        self,
        customer: Customer,
        now: datetime | None = None,
    ) -> list[RuleResult]:
        results = run_customer_rules(customer, config=self._config, now=now)
        summary = summarize_results(results)
        logger.info(
            "customer_rules_evaluated",
            customer_id=customer.id,
            failed_count=summary.failed,
            failed_rules=list(summary.failed_rule_ids),
        )
        return results

    def audit(
        self,
        results: Iterable[RuleResult],
        customer_id: str,
        transaction_id: str | None = None,
        now: datetime | None = None,
    ) -> list[AuditLog]:
        return create_audit_logs(results, customer_id, transaction_id=transaction_id, now=now)
