#!/usr/bin/env python3
"""
Scoring Service - Auto scores and candidate rankings for a job posting.

Auto score: five independent factors (experience, skills, availability,
salary, application quality) summed and capped at 100.

Total score: the auto score alone, or a blend with the recruiter's manual
score when one exists (60/40 by default, see ScorerConfig).

Everything here is pure. Callers that want to persist the auto score back
onto the application record do so themselves after ranking.
"""

from typing import List, Optional, Any, Iterable
from datetime import datetime, timezone
import logging

from core.config_loader import ScorerConfig
from core.scorer import factors
from core.scorer.models import (
    JobRequirement,
    ApplicationProfile,
    ScoreBreakdown,
    CandidateRanking,
)
from core.utils import clamp_score

logger = logging.getLogger(__name__)


def _as_job(job: Any) -> JobRequirement:
    return job if isinstance(job, JobRequirement) else JobRequirement.from_record(job)


def _as_application(application: Any) -> ApplicationProfile:
    if isinstance(application, ApplicationProfile):
        return application
    return ApplicationProfile.from_record(application)


def compute_auto_score(
    job: Any,
    application: Any,
    now: Optional[datetime] = None,
    config: Optional[ScorerConfig] = None
) -> ScoreBreakdown:
    """
    Compute the five-factor auto score of an application against a job.

    Args:
        job: JobRequirement, ORM Job row, or mapping
        application: ApplicationProfile, ORM Application row, or mapping
        now: Reference time for the availability factor (defaults to UTC now)
        config: ScorerConfig (only the cover letter threshold is read here)

    Returns:
        ScoreBreakdown whose ``total`` is the auto score
    """
    config = config or ScorerConfig()
    job = _as_job(job)
    application = _as_application(application)

    return ScoreBreakdown(
        experience_match=factors.experience_match(job.experience_level, application.experience_level),
        skills_match=factors.skills_match(job.skills, application.skills),
        availability_score=factors.availability_score(application.availability_date, now),
        salary_fit=factors.salary_fit(job.salary, application.salary_expectation),
        application_quality=factors.application_quality(
            application.cover_letter,
            application.cv_path,
            application.motivation_letter_path,
            application.phone,
            cover_letter_min_length=config.cover_letter_min_length
        ),
    )


def blend_total_score(
    auto_score: int,
    manual_score: Optional[int],
    config: Optional[ScorerConfig] = None
) -> int:
    """Blend auto and manual scores. Without a manual score the auto score stands."""
    if manual_score is None:
        return auto_score
    config = config or ScorerConfig()
    return clamp_score(config.auto_weight * auto_score + config.manual_weight * manual_score)


def rank_candidates(
    job: Any,
    applications: Iterable[Any],
    now: Optional[datetime] = None,
    config: Optional[ScorerConfig] = None,
    limit: Optional[int] = None
) -> List[CandidateRanking]:
    """
    Score every application against the job and sort by total score.

    Ties keep their input order. Raises ScoringValidationError as soon as
    the job or an application lacks an id.
    """
    config = config or ScorerConfig()
    job = _as_job(job)
    job.require_id()
    now = now or datetime.now(timezone.utc)

    rankings = []
    for raw in applications:
        application = _as_application(raw)
        application.require_id()

        breakdown = compute_auto_score(job, application, now=now, config=config)
        auto_score = breakdown.total
        total_score = blend_total_score(auto_score, application.manual_score, config)

        logger.debug(
            f"Job {job.id} / application {application.id}: auto={auto_score}, "
            f"manual={application.manual_score}, total={total_score}"
        )

        rankings.append(CandidateRanking(
            application_id=application.id,
            auto_score=auto_score,
            total_score=total_score,
            breakdown=breakdown,
            manual_score=application.manual_score,
            job_id=job.id,
            computed_at=now,
        ))

    # list.sort is stable, so equal totals keep input order
    rankings.sort(key=lambda r: r.total_score, reverse=True)

    if limit is not None:
        rankings = rankings[:limit]
    return rankings


def top_candidates(
    job: Any,
    applications: Iterable[Any],
    limit: int = 10,
    now: Optional[datetime] = None,
    config: Optional[ScorerConfig] = None
) -> List[CandidateRanking]:
    """The first ``limit`` entries of rank_candidates."""
    return rank_candidates(job, applications, now=now, config=config, limit=limit)


def final_top_n(
    job: Any,
    applications: Iterable[Any],
    n: int = 3,
    now: Optional[datetime] = None,
    config: Optional[ScorerConfig] = None
) -> List[CandidateRanking]:
    """
    Final shortlist: the best ``n`` applications that a recruiter has scored.

    Applications without a manual score are excluded, not ranked lower.
    """
    ranked = rank_candidates(job, applications, now=now, config=config)
    reviewed = [r for r in ranked if r.is_manually_scored]
    return reviewed[:n]


class ScoringService:
    """
    Config-bound front end to the scoring functions.

    Holds a ScorerConfig so callers do not thread it through every call.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score(self, job: Any, application: Any, now: Optional[datetime] = None) -> ScoreBreakdown:
        return compute_auto_score(job, application, now=now, config=self.config)

    def rank(self, job: Any, applications: Iterable[Any], now: Optional[datetime] = None) -> List[CandidateRanking]:
        return rank_candidates(job, applications, now=now, config=self.config)

    def top_candidates(
        self,
        job: Any,
        applications: Iterable[Any],
        limit: Optional[int] = None,
        now: Optional[datetime] = None
    ) -> List[CandidateRanking]:
        limit = limit if limit is not None else self.config.top_k
        return top_candidates(job, applications, limit=limit, now=now, config=self.config)

    def final_results(
        self,
        job: Any,
        applications: Iterable[Any],
        n: Optional[int] = None,
        now: Optional[datetime] = None
    ) -> List[CandidateRanking]:
        n = n if n is not None else self.config.final_top_n
        results = final_top_n(job, applications, n=n, now=now, config=self.config)
        logger.info(f"Final shortlist: {len(results)} of {n} slot(s) filled")
        return results
