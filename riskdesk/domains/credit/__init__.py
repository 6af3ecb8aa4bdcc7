"""Credit scoring domain."""

from .config import ScoringConfig, ScoringWeights, default_config
from .models import CreditBucket, CreditScore, Impact, ScoreFactor
from .scoring import CreditScoringEngine, calculate_credit_score, classify_bucket

__all__ = [
    "CreditBucket",
    "CreditScore",
    "CreditScoringEngine",
    "Impact",
    "ScoreFactor",
    "ScoringConfig",
    "ScoringWeights",
    "calculate_credit_score",
    "classify_bucket",
    "default_config",
]
