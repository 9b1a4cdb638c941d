#!/usr/bin/env python3
"""
Scoring Module - Candidate auto scores and rankings.

Public API:
- compute_auto_score: five-factor score of one application against a job
- rank_candidates / top_candidates: all applications, best first
- final_top_n: best manually reviewed applications only
- ScoringService: the same operations bound to a ScorerConfig

Layout:

- models.py: Inputs and results (JobRequirement, ApplicationProfile, ScoreBreakdown, CandidateRanking)
- factors.py: The five factor calculations and their parsers
- service.py: Scoring, blending and ranking
- distribution.py: Score buckets for reporting
- errors.py: ScoringValidationError
"""

from core.scorer.errors import ScoringValidationError
from core.scorer.models import (
    JobRequirement,
    ApplicationProfile,
    ScoreBreakdown,
    CandidateRanking,
)
from core.scorer.service import (
    ScoringService,
    compute_auto_score,
    blend_total_score,
    rank_candidates,
    top_candidates,
    final_top_n,
)
from core.scorer.distribution import score_distribution

__all__ = [
    'ScoringService',
    'ScoringValidationError',
    'JobRequirement',
    'ApplicationProfile',
    'ScoreBreakdown',
    'CandidateRanking',
    'compute_auto_score',
    'blend_total_score',
    'rank_candidates',
    'top_candidates',
    'final_top_n',
    'score_distribution',
]
