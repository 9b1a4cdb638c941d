#!/usr/bin/env python3
"""
Ranking endpoints - ranked candidates and final shortlist per job.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config_loader import get_config
from core.rbac import RECRUITMENT_ROLES
from ..dependencies import get_db, require_roles
from ..services.recruitment_service import RecruitmentService
from ..models.responses import RankingsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["rankings"])


@router.get("/{job_id}/rankings", response_model=RankingsResponse)
def get_rankings(
    job_id: int,
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum candidates to return"),
    role: str = Depends(require_roles(*RECRUITMENT_ROLES)),
    db: Session = Depends(get_db)
):
    """
    Get the job's candidates ranked by total score (highest first).

    Recomputes every auto score from the stored job and applications and
    caches it on the application records. Candidates with a manual score
    are ranked on the 60/40 auto/manual blend.
    """
    service = RecruitmentService(db, get_config().scorer)
    rankings = service.get_top_candidates(job_id, limit=limit)

    return RankingsResponse(
        success=True,
        job_id=job_id,
        count=len(rankings),
        rankings=rankings
    )


@router.get("/{job_id}/final-results", response_model=RankingsResponse)
def get_final_results(
    job_id: int,
    n: Optional[int] = Query(default=None, ge=1, le=50, description="Shortlist size"),
    role: str = Depends(require_roles(*RECRUITMENT_ROLES)),
    db: Session = Depends(get_db)
):
    """
    Get the final shortlist: best candidates among those a recruiter has scored.

    Applications without a manual score never appear here.
    """
    service = RecruitmentService(db, get_config().scorer)
    shortlist = service.get_final_results(job_id, n=n)

    return RankingsResponse(
        success=True,
        job_id=job_id,
        count=len(shortlist),
        rankings=shortlist
    )
