#!/usr/bin/env python3
"""
Recruitment service - ranking, assignment and manual scoring workflow.

Scores are always recomputed from the stored job and application data; the
auto_score column on applications is only a cache written back after
ranking.
"""

import logging
from typing import List, Optional, Any, Dict
from sqlalchemy.orm import Session

from core.config_loader import ScorerConfig
from core.scorer import ScoringService, CandidateRanking, score_distribution
from database.models import Application, Job
from database.repository import RecruitmentRepository
from ..models.responses import (
    ApplicationSummary,
    CandidateRankingResponse,
    ScoreBreakdownResponse,
    ScoreBucket,
)
from ..utils import safe_int, safe_str, safe_datetime_iso
from ..exceptions import JobNotFoundException, ApplicationNotFoundException, InvalidScoreException

logger = logging.getLogger(__name__)


class RecruitmentService:
    """Service for candidate ranking and review."""

    def __init__(self, db: Session, config: Optional[ScorerConfig] = None):
        self.db = db
        self.repo = RecruitmentRepository(db)
        self.scoring = ScoringService(config)

    def get_top_candidates(self, job_id: int, limit: Optional[int] = None) -> List[CandidateRankingResponse]:
        """
        Rank a job's applications and cache the computed auto scores.

        Args:
            job_id: The job ID.
            limit: Maximum candidates to return (defaults to ScorerConfig.top_k).

        Returns:
            Ranked candidates, best first.

        Raises:
            JobNotFoundException: If the job does not exist.
        """
        job = self._get_job(job_id)
        applications = self.repo.applications.get_for_job(job_id)

        rankings = self.scoring.rank(job, applications)
        self._cache_auto_scores(rankings)

        limit = limit if limit is not None else self.scoring.config.top_k
        logger.info(f"Ranked {len(rankings)} application(s) for job {job_id}, returning top {limit}")

        return [self._to_ranking_response(r, rank) for rank, r in enumerate(rankings[:limit], start=1)]

    def get_final_results(self, job_id: int, n: Optional[int] = None) -> List[CandidateRankingResponse]:
        """
        Final shortlist among manually scored applications.

        Raises:
            JobNotFoundException: If the job does not exist.
        """
        job = self._get_job(job_id)
        applications = self.repo.applications.get_for_job(job_id)

        shortlist = self.scoring.final_results(job, applications, n=n)
        return [self._to_ranking_response(r, rank) for rank, r in enumerate(shortlist, start=1)]

    def assign_candidates(self, application_ids: List[int], recruiter_id: str) -> int:
        """
        Assign applications to a recruiter and mark them ``assigned``.

        Returns:
            Number of applications updated.

        Raises:
            ApplicationNotFoundException: If any application id is unknown.
        """
        assigned = self.repo.applications.assign_recruiter(application_ids, recruiter_id)

        missing = set(application_ids) - {a.id for a in assigned}
        if missing:
            self.repo.rollback()
            raise ApplicationNotFoundException(
                f"Application(s) not found: {', '.join(str(i) for i in sorted(missing))}"
            )

        self.repo.commit()
        logger.info(f"Assigned {len(assigned)} application(s) to recruiter {recruiter_id}")
        return len(assigned)

    def update_manual_score(self, application_id: int, score: int, notes: Optional[str] = None) -> ApplicationSummary:
        """
        Record a recruiter's manual score and mark the application ``scored``.

        Raises:
            InvalidScoreException: If score is outside 0-100.
            ApplicationNotFoundException: If the application does not exist.
        """
        if not (0 <= score <= 100):
            raise InvalidScoreException(f"score must be between 0 and 100, got {score}")

        application = self.repo.applications.get_by_id(application_id)
        if not application:
            raise ApplicationNotFoundException(f"Application {application_id} not found")

        self.repo.applications.record_manual_score(application, score, notes)
        self.repo.commit()

        return self._to_application_summary(application)

    def get_assigned_applications(self, recruiter_id: str) -> List[ApplicationSummary]:
        applications = self.repo.applications.get_by_recruiter(recruiter_id)
        return [self._to_application_summary(a) for a in applications]

    def search_by_score(
        self,
        min_auto_score: Optional[int] = None,
        max_auto_score: Optional[int] = None,
        min_manual_score: Optional[int] = None,
        max_manual_score: Optional[int] = None
    ) -> List[ApplicationSummary]:
        applications = self.repo.applications.search_by_score(
            min_auto_score=min_auto_score,
            max_auto_score=max_auto_score,
            min_manual_score=min_manual_score,
            max_manual_score=max_manual_score
        )
        return [self._to_application_summary(a) for a in applications]

    def get_score_distribution(self, job_id: Optional[int] = None) -> List[ScoreBucket]:
        """Bucket the cached auto scores, optionally for one job."""
        if job_id is not None:
            self._get_job(job_id)
        scores = self.repo.applications.get_auto_scores(job_id)
        return [ScoreBucket(**bucket) for bucket in score_distribution(scores)]

    # Private methods

    def _get_job(self, job_id: int) -> Job:
        job = self.repo.jobs.get_by_id(job_id)
        if not job:
            raise JobNotFoundException(f"Job {job_id} not found")
        return job

    def _cache_auto_scores(self, rankings: List[CandidateRanking]) -> None:
        scores: Dict[Any, int] = {r.application_id: r.auto_score for r in rankings}
        if self.repo.applications.save_auto_scores(scores):
            self.repo.commit()

    def _to_ranking_response(self, ranking: CandidateRanking, rank: int) -> CandidateRankingResponse:
        return CandidateRankingResponse(
            application_id=ranking.application_id,
            job_id=ranking.job_id,
            rank=rank,
            auto_score=ranking.auto_score,
            manual_score=ranking.manual_score,
            total_score=ranking.total_score,
            breakdown=ScoreBreakdownResponse(**ranking.breakdown.to_dict()),
            computed_at=safe_datetime_iso(ranking.computed_at)
        )

    def _to_application_summary(self, application: Application) -> ApplicationSummary:
        return ApplicationSummary(
            application_id=application.id,
            job_id=application.job_id,
            user_id=safe_str(application.user_id),
            status=safe_str(application.status, "pending"),
            assigned_recruiter=application.assigned_recruiter,
            auto_score=safe_int(application.auto_score),
            manual_score=application.manual_score,
            score_notes=application.score_notes,
            created_at=safe_datetime_iso(application.created_at)
        )
