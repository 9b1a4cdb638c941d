import logging
from typing import Optional, Any

from sqlalchemy import select

from database.models import Job
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    def get_by_id(self, job_id: Any) -> Optional[Job]:
        stmt = select(Job).where(Job.id == job_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, **fields: Any) -> Job:
        return self._persist(Job(**fields))
