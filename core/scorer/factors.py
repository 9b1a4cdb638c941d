#!/usr/bin/env python3
"""
Factor Calculations - The five sub-scores that make up the auto score.

Each factor is total: missing or unparsable input falls back to a neutral
default instead of raising, so a partially filled application still scores.

- experience_match: 0-25
- skills_match: 0-30
- availability_score: 0-15
- salary_fit: 0-15
- application_quality: 0-15
"""

from typing import Any, Iterable, Optional, Tuple
from datetime import date, datetime, timezone
import logging
import math
import re

from dateutil import parser as date_parser

from core.utils import round_half_up

logger = logging.getLogger(__name__)

EXPERIENCE_RANKS = {'Débutant': 1, 'Intermédiaire': 2, 'Senior': 3}
NEUTRAL_EXPERIENCE_RANK = 2

_SALARY_VALUE = re.compile(r'(\d+)k')
_SALARY_RANGE = re.compile(r'(\d+)k\s*-\s*(\d+)k')

SECONDS_PER_DAY = 60 * 60 * 24


def experience_match(job_level: Optional[str], candidate_level: Optional[str]) -> int:
    """
    Compare experience levels on the Débutant < Intermédiaire < Senior scale.

    A job without a declared level scores a flat 10. Otherwise unknown values
    on either side (including a missing candidate level) rank as Intermédiaire.
    """
    if not job_level:
        return 10

    job_rank = EXPERIENCE_RANKS.get(job_level, NEUTRAL_EXPERIENCE_RANK)
    candidate_rank = EXPERIENCE_RANKS.get(candidate_level or '', NEUTRAL_EXPERIENCE_RANK)

    if candidate_rank >= job_rank:
        return 25
    if candidate_rank == job_rank - 1:
        return 15
    return 5


def matched_skills(job_skills: Iterable[str], candidate_skills: Iterable[str]) -> list:
    """
    Return the job skills covered by at least one candidate skill.

    Matching is case-insensitive and bidirectional on substrings, so
    "React" and "React.js" cover each other.
    """
    candidate = [s.lower() for s in candidate_skills]
    return [
        skill for skill in job_skills
        if any(cs in skill.lower() or skill.lower() in cs for cs in candidate)
    ]


def skills_match(job_skills: Optional[Iterable[str]], candidate_skills: Optional[Iterable[str]]) -> int:
    # A blank skill would be a substring of everything
    job_skills = [s.strip() for s in job_skills or [] if s and s.strip()]
    candidate_skills = [s.strip() for s in candidate_skills or [] if s and s.strip()]

    if not job_skills or not candidate_skills:
        return 15

    covered = matched_skills(job_skills, candidate_skills)
    return round_half_up(30 * len(covered) / len(job_skills))


def _to_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        try:
            parsed = date_parser.isoparse(str(value))
        except (ValueError, OverflowError):
            logger.debug(f"Unparsable availability date {value!r}, using neutral score")
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_until(availability: Any, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days from ``now`` until ``availability``, rounded up. None when unknown."""
    available_at = _to_datetime(availability)
    if available_at is None:
        return None

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return math.ceil((available_at - now).total_seconds() / SECONDS_PER_DAY)


def availability_score(availability: Any, now: Optional[datetime] = None) -> int:
    days = days_until(availability, now)
    if days is None:
        return 12  # assume available soon
    if days <= 0:
        return 15
    if days <= 30:
        return 12
    if days <= 60:
        return 8
    return 3


def parse_salary_expectation(value: Optional[str]) -> Optional[int]:
    """Parse "45k" style expectations into an amount. None when unparsable."""
    if not value:
        return None
    match = _SALARY_VALUE.search(str(value))
    return int(match.group(1)) * 1000 if match else None


def parse_salary_range(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse "40k - 55k €" style ranges into (min, max). None when unparsable."""
    if not value:
        return None
    match = _SALARY_RANGE.search(str(value))
    if not match:
        return None
    return int(match.group(1)) * 1000, int(match.group(2)) * 1000


def salary_fit(job_salary: Optional[str], salary_expectation: Optional[str]) -> int:
    """
    Score the candidate's expectation against the job's range.

    Expectations below the minimum land in the "close" bracket (10), the same
    as expectations up to 110% of the maximum.
    """
    expected = parse_salary_expectation(salary_expectation)
    salary_range = parse_salary_range(job_salary)

    if expected is None or salary_range is None:
        logger.debug(
            f"Salary not comparable (job={job_salary!r}, expectation={salary_expectation!r}), "
            f"using neutral score"
        )
        return 10

    minimum, maximum = salary_range
    if minimum <= expected <= maximum:
        return 15
    if expected <= maximum * 1.1:
        return 10
    return 3


def application_quality(
    cover_letter: Optional[str],
    cv_path: Optional[str],
    motivation_letter_path: Optional[str],
    phone: Optional[str],
    cover_letter_min_length: int = 100
) -> int:
    quality = 0
    if cover_letter and len(cover_letter) > cover_letter_min_length:
        quality += 5
    if cv_path:
        quality += 5
    if motivation_letter_path:
        quality += 3
    if phone:
        quality += 2
    return min(quality, 15)