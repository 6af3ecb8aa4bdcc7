"""Compliance rule evaluation domain."""

from .audit import create_audit_log, create_audit_logs
from .config import RuleConfig, default_config
from .models import AuditLog, AuditResult, RuleResult, RuleSummary, Severity
from .rule_engine import (
    RuleEngine,
    check_account_age,
    check_country_restriction,
    check_income_ratio,
    check_kyc_documents,
    check_large_transaction,
    check_transaction_velocity,
    highest_severity,
    run_all_transaction_rules,
    run_customer_rules,
    summarize_results,
)
from .rules import ALL_RULES

__all__ = [
    "ALL_RULES",
    "AuditLog",
    "AuditResult",
    "RuleConfig",
    "RuleEngine",
    "RuleResult",
    "RuleSummary",
    "Severity",
    "check_account_age",
    "check_country_restriction",
    "check_income_ratio",
    "check_kyc_documents",
    "check_large_transaction",
    "check_transaction_velocity",
    "create_audit_log",
    "create_audit_logs",
    "default_config",
    "highest_severity",
    "run_all_transaction_rules",
    "run_customer_rules",
    "summarize_results",
]
