#!/usr/bin/env python3
"""
Application endpoints - assignment, manual scoring and score search.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import get_config
from core.rbac import RECRUITMENT_ROLES, ADMIN_AREA_ROLES
from ..dependencies import get_db, get_current_user_id, require_roles, require_permissions
from ..services.recruitment_service import RecruitmentService
from ..models.requests import ManualScoreUpdate, AssignCandidatesRequest
from ..models.responses import (
    ApplicationsResponse,
    AssignCandidatesResponse,
    ManualScoreResponse,
    ScoreDistributionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


@router.get("/api/applications/search", response_model=ApplicationsResponse)
def search_applications(
    min_auto_score: Optional[int] = Query(default=None, ge=0, le=100),
    max_auto_score: Optional[int] = Query(default=None, ge=0, le=100),
    min_manual_score: Optional[int] = Query(default=None, ge=0, le=100),
    max_manual_score: Optional[int] = Query(default=None, ge=0, le=100),
    role: str = Depends(require_roles(*RECRUITMENT_ROLES)),
    db: Session = Depends(get_db)
):
    """
    Search applications by cached auto score and manual score ranges.

    Sorted by auto score, then manual score (highest first).
    """
    service = RecruitmentService(db, get_config().scorer)
    applications = service.search_by_score(
        min_auto_score=min_auto_score,
        max_auto_score=max_auto_score,
        min_manual_score=min_manual_score,
        max_manual_score=max_manual_score
    )

    return ApplicationsResponse(
        success=True,
        count=len(applications),
        applications=applications
    )


@router.get("/api/applications/score-distribution", response_model=ScoreDistributionResponse)
def get_score_distribution(
    job_id: Optional[int] = Query(default=None, description="Restrict to one job"),
    role: str = Depends(require_roles(*ADMIN_AREA_ROLES)),
    db: Session = Depends(get_db)
):
    """Distribution of cached auto scores in 20-point buckets (empty buckets omitted)."""
    service = RecruitmentService(db, get_config().scorer)
    buckets = service.get_score_distribution(job_id)

    return ScoreDistributionResponse(success=True, job_id=job_id, buckets=buckets)


@router.post("/api/applications/assign", response_model=AssignCandidatesResponse)
def assign_candidates(
    request: AssignCandidatesRequest,
    role: str = Depends(require_roles(*RECRUITMENT_ROLES)),
    db: Session = Depends(get_db)
):
    """Assign applications to a recruiter. Each becomes ``assigned``."""
    service = RecruitmentService(db, get_config().scorer)
    count = service.assign_candidates(request.application_ids, request.recruiter_id)

    return AssignCandidatesResponse(
        success=True,
        recruiter_id=request.recruiter_id,
        assigned_count=count
    )


@router.put("/api/applications/{application_id}/manual-score", response_model=ManualScoreResponse)
def update_manual_score(
    application_id: int,
    update: ManualScoreUpdate,
    role: str = Depends(require_permissions("score_candidates")),
    db: Session = Depends(get_db)
):
    """
    Record a recruiter's manual score (0-100) and optional notes.

    The application becomes ``scored`` and enters the final shortlist pool.
    """
    service = RecruitmentService(db, get_config().scorer)
    application = service.update_manual_score(application_id, update.score, update.notes)

    return ManualScoreResponse(success=True, application=application)


@router.get("/api/recruiter/assigned-applications", response_model=ApplicationsResponse)
def get_assigned_applications(
    user_id: str = Depends(get_current_user_id),
    role: str = Depends(require_roles(*RECRUITMENT_ROLES)),
    db: Session = Depends(get_db)
):
    """Applications assigned to the calling recruiter, newest first."""
    service = RecruitmentService(db, get_config().scorer)
    applications = service.get_assigned_applications(user_id)

    return ApplicationsResponse(
        success=True,
        count=len(applications),
        applications=applications
    )
