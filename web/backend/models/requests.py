#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class ManualScoreUpdate(BaseModel):
    """Request to record a recruiter's manual score."""
    score: int = Field(ge=0, le=100, description="Manual score (0-100)")
    notes: Optional[str] = Field(None, description="Recruiter comments")


class AssignCandidatesRequest(BaseModel):
    """Request to assign applications to a recruiter."""
    application_ids: List[int] = Field(..., min_length=1, description="Applications to assign")
    recruiter_id: str = Field(..., min_length=1, description="User id of the recruiter")
