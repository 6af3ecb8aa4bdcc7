"""Tests for credit scoring configuration."""

from dataclasses import FrozenInstanceError, replace

import pytest

from riskdesk.domains.credit.config import ScoringConfig, ScoringWeights, default_config
from riskdesk.shared.models import KYCStatus


class TestScoringWeights:
    def test_defaults_sum_to_one(self):
        assert ScoringWeights().total() == pytest.approx(1.0)

    def test_rejects_bad_sum(self):
        with pytest.raises(ValueError, match="must sum to 1.0"):
            replace(ScoringWeights(), income=0.5)

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="must be non-negative"):
            ScoringWeights(income=-0.1, repayment_history=0.6)


class TestScoringConfig:
    def test_kyc_scores_read_only(self):
        with pytest.raises(TypeError):
            default_config.kyc_scores[KYCStatus.PENDING] = 99.0

    def test_plain_dict_wrapped(self):
        scores = {status: 10.0 for status in KYCStatus}
        config = ScoringConfig(kyc_scores=scores)
        scores[KYCStatus.VERIFIED] = 0.0
        assert config.kyc_scores[KYCStatus.VERIFIED] == 10.0

    def test_missing_status_rejected(self):
        with pytest.raises(ValueError, match="kyc_scores missing statuses"):
            ScoringConfig(kyc_scores={KYCStatus.VERIFIED: 100.0})

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            default_config.buckets.excellent = 90

    def test_hashable(self):
        assert hash(ScoringConfig()) == hash(default_config)
        assert ScoringConfig() == default_config

    def test_kyc_scores_still_compared(self):
        scores = {status: 10.0 for status in KYCStatus}
        assert ScoringConfig(kyc_scores=scores) != default_config


class TestFromEnv:
    def test_balanced_override(self, monkeypatch):
        monkeypatch.setenv("CREDIT_WEIGHT_INCOME", "0.25")
        monkeypatch.setenv("CREDIT_WEIGHT_KYC_STATUS", "0.05")
        monkeypatch.setenv("CREDIT_ACTIVITY_LOOKBACK_DAYS", "60")

        config = ScoringConfig.from_env()

        assert config.weights.income == 0.25
        assert config.weights.kyc_status == 0.05
        assert config.activity.lookback_days == 60

    def test_unbalanced_override_rejected(self, monkeypatch):
        monkeypatch.setenv("CREDIT_WEIGHT_INCOME", "0.25")
        with pytest.raises(ValueError, match="must sum to 1.0"):
            ScoringConfig.from_env()
