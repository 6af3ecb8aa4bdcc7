"""Abstract base class for compliance rules."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from riskdesk.shared.models import Customer, Transaction

from ..config import RuleConfig
from ..models import RuleResult, Severity


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may look at for one evaluation.

    ``now`` is read once by the caller so every rule in a batch shares the
    same reference time.
    """

    now: datetime
    transaction: Transaction | None = None
    customer: Customer | None = None
    transactions: Sequence[Transaction] = field(default_factory=tuple)
    customer_id: str | None = None

    def require_transaction(self, rule_id: str) -> Transaction:
        if self.transaction is None:
            raise ValueError(f"{rule_id} requires a transaction")
        return self.transaction

    def require_customer(self, rule_id: str) -> Customer:
        if self.customer is None:
            raise ValueError(f"{rule_id} requires a customer")
        return self.customer

    def require_customer_id(self, rule_id: str) -> str:
        """Explicit id first, then the customer, then the transaction's owner."""
        if self.customer_id is not None:
            return self.customer_id
        if self.customer is not None:
            return self.customer.id
        if self.transaction is not None:
            return self.transaction.customer_id
        raise ValueError(f"{rule_id} requires a customer id")


class ComplianceRule(ABC):
    """Base class for all catalog rules.

    Rules are synchronous and side-effect free; the same context and config
    always produce the same result.
    """

    rule_id: str
    rule_name: str

    @abstractmethod
    def evaluate(self, context: RuleContext, config: RuleConfig) -> RuleResult:
        """Evaluate this rule and return a RuleResult."""
        ...

    def _passed(self, details: str) -> RuleResult:
        return RuleResult(
            rule_id=self.rule_id,
            rule_name=self.rule_name,
            passed=True,
            details=details,
        )

    def _failed(self, details: str, severity: Severity) -> RuleResult:
        return RuleResult(
            rule_id=self.rule_id,
            rule_name=self.rule_name,
            passed=False,
            details=details,
            severity=severity,
        )
