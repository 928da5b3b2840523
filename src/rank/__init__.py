"""Applicant scoring: weights, component scorers and the scoring engine."""

from src.rank.scoring import MatchResult, ScoringEngine
from src.rank.weights import ConfigurationError, ScoringWeights

__all__ = ["ConfigurationError", "MatchResult", "ScoringEngine", "ScoringWeights"]
