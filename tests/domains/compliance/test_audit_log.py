"""Tests for audit log synthesis from rule results."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from riskdesk.domains.compliance.audit import audit_result_for, create_audit_log, create_audit_logs
from riskdesk.domains.compliance.models import AuditResult, RuleResult, Severity
from riskdesk.domains.compliance.rule_engine import (
    check_kyc_documents,
    run_all_transaction_rules,
    run_customer_rules,
)
from tests.conftest import NOW, make_customer, make_history, make_transaction

PASSED = RuleResult(
    rule_id="RULE_005",
    rule_name="Account Age Verification",
    passed=True,
    details="Account age 18 months meets minimum requirement",
)
FAILED = RuleResult(
    rule_id="RULE_003",
    rule_name="Blacklisted Country Check",
    passed=False,
    details="Transaction involves restricted jurisdiction: KP",
    severity=Severity.CRITICAL,
)


class TestCreateAuditLog:
    def test_passed_maps_to_pass(self):
        log = create_audit_log(PASSED, "cust-1")
        assert log.result == AuditResult.PASS

    def test_failed_maps_to_flag(self):
        log = create_audit_log(FAILED, "cust-1", "txn-1")
        assert log.result == AuditResult.FLAG

    def test_never_emits_fail(self):
        customer = make_customer(income=0.0, account_age=0, documents_provided=[])
        transaction = make_transaction(amount=99_000.0, counterparty_country="KP")
        results = (
            run_all_transaction_rules(transaction, customer, make_history(20), now=NOW)
            + run_customer_rules(customer, now=NOW)
            + run_customer_rules(make_customer(), now=NOW)
        )
        assert any(r.passed for r in results) and any(not r.passed for r in results)

        outcomes = {create_audit_log(r, customer.id).result for r in results}
        assert AuditResult.FAIL not in outcomes
        assert outcomes == {AuditResult.PASS, AuditResult.FLAG}

    def test_copies_rule_fields(self):
        log = create_audit_log(FAILED, "cust-7", transaction_id="txn-9", now=NOW)
        assert log.rule_id == "RULE_003"
        assert log.rule_name == "Blacklisted Country Check"
        assert log.customer_id == "cust-7"
        assert log.transaction_id == "txn-9"
        assert log.details == FAILED.details
        assert log.timestamp == NOW
        assert log.metadata is None

    def test_transaction_id_optional(self):
        log = create_audit_log(check_kyc_documents(make_customer()), "cust-1")
        assert log.transaction_id is None

    def test_metadata_attached(self):
        log = create_audit_log(FAILED, "cust-1", metadata={"source": "batch-import"})
        assert log.metadata == {"source": "batch-import"}

    def test_unique_ids(self):
        ids = {create_audit_log(PASSED, "cust-1", now=NOW).id for _ in range(200)}
        assert len(ids) == 200
        assert all(i.startswith("log_") for i in ids)

    def test_timestamp_is_call_time(self):
        before = datetime.now(UTC)
        log = create_audit_log(PASSED, "cust-1")
        after = datetime.now(UTC)
        assert before <= log.timestamp <= after

    def test_immutable(self):
        log = create_audit_log(PASSED, "cust-1")
        with pytest.raises(ValidationError):
            log.result = AuditResult.FAIL

    def test_camel_case_dump(self):
        dumped = create_audit_log(FAILED, "cust-1", "txn-1", now=NOW).model_dump(
            by_alias=True, mode="json"
        )
        assert dumped["ruleId"] == "RULE_003"
        assert dumped["customerId"] == "cust-1"
        assert dumped["transactionId"] == "txn-1"
        assert dumped["result"] == "flag"


class TestAuditResultFor:
    @pytest.mark.parametrize("result,expected", [(PASSED, AuditResult.PASS), (FAILED, AuditResult.FLAG)])
    def test_mapping(self, result, expected):
        assert audit_result_for(result) == expected


class TestCreateAuditLogs:
    def test_one_log_per_result_shared_timestamp(self):
        logs = create_audit_logs([PASSED, FAILED], "cust-1", transaction_id="txn-1")
        assert [log.rule_id for log in logs] == ["RULE_005", "RULE_003"]
        assert logs[0].timestamp == logs[1].timestamp
        assert logs[0].id != logs[1].id

    def test_empty(self):
        assert create_audit_logs([], "cust-1") == []
