#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict

from core.scorer.models import FACTOR_MAXIMUMS, MAX_TOTAL_SCORE


class ScoreBreakdownResponse(BaseModel):
    """Five-factor auto score."""
    experience_match: int = Field(ge=0, le=FACTOR_MAXIMUMS['experience_match'])
    skills_match: int = Field(ge=0, le=FACTOR_MAXIMUMS['skills_match'])
    availability_score: int = Field(ge=0, le=FACTOR_MAXIMUMS['availability_score'])
    salary_fit: int = Field(ge=0, le=FACTOR_MAXIMUMS['salary_fit'])
    application_quality: int = Field(ge=0, le=FACTOR_MAXIMUMS['application_quality'])
    total: int = Field(ge=0, le=MAX_TOTAL_SCORE)


class CandidateRankingResponse(BaseModel):
    """One ranked candidate."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "application_id": 42,
                "job_id": 7,
                "rank": 1,
                "auto_score": 82,
                "manual_score": 90,
                "total_score": 85,
                "breakdown": {
                    "experience_match": 25,
                    "skills_match": 30,
                    "availability_score": 12,
                    "salary_fit": 10,
                    "application_quality": 5,
                    "total": 82
                },
                "computed_at": "2026-10-01T12:00:00+00:00"
            }
        }
    )

    application_id: int
    job_id: Optional[int]
    rank: int = Field(ge=1)
    auto_score: int = Field(ge=0, le=100)
    manual_score: Optional[int] = Field(None, ge=0, le=100)
    total_score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdownResponse
    computed_at: Optional[str] = None


class RankingsResponse(BaseModel):
    """Response containing ranked candidates for a job."""
    success: bool
    job_id: int
    count: int
    rankings: List[CandidateRankingResponse]


class ApplicationSummary(BaseModel):
    """Stored application with its review state."""
    application_id: int
    job_id: int
    user_id: str
    status: str
    assigned_recruiter: Optional[str] = None
    auto_score: int = Field(ge=0, le=100)
    manual_score: Optional[int] = Field(None, ge=0, le=100)
    score_notes: Optional[str] = None
    created_at: Optional[str] = None


class ApplicationsResponse(BaseModel):
    """Response containing a list of applications."""
    success: bool
    count: int
    applications: List[ApplicationSummary]


class AssignCandidatesResponse(BaseModel):
    """Response after assigning applications to a recruiter."""
    success: bool
    recruiter_id: str
    assigned_count: int


class ManualScoreResponse(BaseModel):
    """Response after recording a manual score."""
    success: bool
    application: ApplicationSummary


class ScoreBucket(BaseModel):
    """One bucket of the auto score distribution."""
    name: str
    min: int
    max: int
    count: int = Field(ge=0)


class ScoreDistributionResponse(BaseModel):
    """Distribution of stored auto scores."""
    success: bool
    job_id: Optional[int] = None
    buckets: List[ScoreBucket]


class RolePermissionsResponse(BaseModel):
    """Effective permissions of a role."""
    role: str
    hierarchy_level: int
    permissions: List[str]


class ModuleAccessResponse(BaseModel):
    """Module visibility flags for a role."""
    role: str
    modules: Dict[str, bool]


class ManageRoleResponse(BaseModel):
    """Whether one role may manage another."""
    acting_role: str
    target_role: str
    allowed: bool


class SessionAccessResponse(BaseModel):
    """Everything the client needs to shape its navigation for the caller."""
    role: str
    hierarchy_level: int
    permissions: List[str]
    modules: Dict[str, bool]
    redirect_path: str
