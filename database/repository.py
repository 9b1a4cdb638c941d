import logging
from sqlalchemy.orm import Session

from database.repositories import JobRepository, ApplicationRepository, UserRepository
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RecruitmentRepository(BaseRepository):
    """
    Facade over the per-aggregate repositories sharing one Session.

    Usage:
        repo = RecruitmentRepository(session)
        job = repo.jobs.get_by_id(job_id)
        applications = repo.applications.get_for_job(job_id)
    """

    def __init__(self, db: Session):
        super().__init__(db)
        self.jobs = JobRepository(db)
        self.applications = ApplicationRepository(db)
        self.users = UserRepository(db)
