#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring inputs and results.

JobRequirement and ApplicationProfile are the subsets of the stored Job and
Application records that the engine reads. They can be built from ORM rows
or plain mappings (snake_case or camelCase keys) via ``from_record``.
"""

from typing import List, Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from datetime import datetime

from core.scorer.errors import ScoringValidationError

FACTOR_MAXIMUMS = {
    'experience_match': 25,
    'skills_match': 30,
    'availability_score': 15,
    'salary_fit': 15,
    'application_quality': 15,
}

MAX_TOTAL_SCORE = 100


def _read(record: Any, *names: str) -> Any:
    """Read the first present field from a mapping or an attribute-bearing object."""
    for name in names:
        if isinstance(record, dict):
            if record.get(name) is not None:
                return record[name]
        else:
            value = getattr(record, name, None)
            if value is not None:
                return value
    return None


def _as_skill_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    return [str(s).strip() for s in value if s is not None and str(s).strip()]


@dataclass(frozen=True)
class JobRequirement:
    """Job fields used for scoring."""
    id: Any
    experience_level: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    salary: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> 'JobRequirement':
        return cls(
            id=_read(record, 'id'),
            experience_level=_read(record, 'experience_level', 'experienceLevel'),
            skills=_as_skill_list(_read(record, 'skills')),
            salary=_read(record, 'salary'),
        )

    def require_id(self) -> None:
        if self.id is None:
            raise ScoringValidationError("Job record is missing its id")


@dataclass(frozen=True)
class ApplicationProfile:
    """Application fields used for scoring."""
    id: Any
    experience_level: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    availability_date: Optional[Any] = None  # date, datetime or ISO string
    salary_expectation: Optional[str] = None
    cover_letter: Optional[str] = None
    cv_path: Optional[str] = None
    motivation_letter_path: Optional[str] = None
    phone: Optional[str] = None
    manual_score: Optional[int] = None

    @classmethod
    def from_record(cls, record: Any) -> 'ApplicationProfile':
        return cls(
            id=_read(record, 'id'),
            experience_level=_read(record, 'experience_level', 'experienceLevel'),
            skills=_as_skill_list(_read(record, 'skills')),
            availability_date=_read(record, 'availability_date', 'availabilityDate', 'availability'),
            salary_expectation=_read(record, 'salary_expectation', 'salaryExpectation'),
            cover_letter=_read(record, 'cover_letter', 'coverLetter'),
            cv_path=_read(record, 'cv_path', 'cvPath'),
            motivation_letter_path=_read(record, 'motivation_letter_path', 'motivationLetterPath'),
            phone=_read(record, 'phone'),
            manual_score=_read(record, 'manual_score', 'manualScore'),
        )

    def require_id(self) -> None:
        if self.id is None:
            raise ScoringValidationError("Application record is missing its id")


@dataclass(frozen=True)
class ScoreBreakdown:
    """Five-factor auto score. ``total`` is always the capped sum of the factors."""
    experience_match: int = 0
    skills_match: int = 0
    availability_score: int = 0
    salary_fit: int = 0
    application_quality: int = 0

    @property
    def total(self) -> int:
        raw = (
            self.experience_match +
            self.skills_match +
            self.availability_score +
            self.salary_fit +
            self.application_quality
        )
        return max(0, min(MAX_TOTAL_SCORE, raw))

    def to_dict(self) -> Dict[str, int]:
        data = asdict(self)
        data['total'] = self.total
        return data


@dataclass(frozen=True)
class CandidateRanking:
    """One ranked candidate. Recomputable from job + application at any time."""
    application_id: Any
    auto_score: int
    total_score: int
    breakdown: ScoreBreakdown
    manual_score: Optional[int] = None
    job_id: Any = None
    computed_at: Optional[datetime] = None

    @property
    def is_manually_scored(self) -> bool:
        return self.manual_score is not None
