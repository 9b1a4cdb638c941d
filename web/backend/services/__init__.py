"""Business logic services."""

from .recruitment_service import RecruitmentService
