import logging
from typing import Dict, Iterable, List, Optional, Any

from sqlalchemy import select

from database.models import Application
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def get_by_id(self, application_id: Any) -> Optional[Application]:
        stmt = select(Application).where(Application.id == application_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_job(self, job_id: Any) -> List[Application]:
        # Oldest first so ranking ties keep submission order
        stmt = (
            select(Application)
            .where(Application.job_id == job_id)
            .order_by(Application.created_at.asc(), Application.id.asc())
        )
        return self.db.execute(stmt).scalars().all()

    def get_by_ids(self, application_ids: Iterable[Any]) -> List[Application]:
        ids = list(application_ids)
        if not ids:
            return []
        stmt = select(Application).where(Application.id.in_(ids))
        return self.db.execute(stmt).scalars().all()

    def get_by_recruiter(self, recruiter_id: str) -> List[Application]:
        stmt = (
            select(Application)
            .where(Application.assigned_recruiter == recruiter_id)
            .order_by(Application.created_at.desc(), Application.id.desc())
        )
        return self.db.execute(stmt).scalars().all()

    def get_auto_scores(self, job_id: Optional[Any] = None) -> List[Optional[int]]:
        stmt = select(Application.auto_score)
        if job_id is not None:
            stmt = stmt.where(Application.job_id == job_id)
        return list(self.db.execute(stmt).scalars().all())

    def search_by_score(
        self,
        min_auto_score: Optional[int] = None,
        max_auto_score: Optional[int] = None,
        min_manual_score: Optional[int] = None,
        max_manual_score: Optional[int] = None
    ) -> List[Application]:
        stmt = select(Application)

        if min_auto_score is not None:
            stmt = stmt.where(Application.auto_score >= min_auto_score)
        if max_auto_score is not None:
            stmt = stmt.where(Application.auto_score <= max_auto_score)
        if min_manual_score is not None:
            stmt = stmt.where(Application.manual_score >= min_manual_score)
        if max_manual_score is not None:
            stmt = stmt.where(Application.manual_score <= max_manual_score)

        stmt = stmt.order_by(
            Application.auto_score.desc(),
            Application.manual_score.desc().nulls_last()
        )
        return self.db.execute(stmt).scalars().all()

    def save_auto_scores(self, scores: Dict[Any, int]) -> int:
        """Cache computed auto scores on their application rows."""
        updated = 0
        for application in self.get_by_ids(scores.keys()):
            new_score = scores[application.id]
            if application.auto_score != new_score:
                application.auto_score = new_score
                updated += 1

        if updated > 0:
            logger.info(f"Updated cached auto score on {updated} application(s)")
        return updated

    def assign_recruiter(self, application_ids: Iterable[Any], recruiter_id: str) -> List[Application]:
        applications = self.get_by_ids(application_ids)
        for application in applications:
            application.assigned_recruiter = recruiter_id
            application.status = 'assigned'
        return applications

    def record_manual_score(
        self,
        application: Application,
        score: int,
        notes: Optional[str] = None
    ) -> Application:
        application.manual_score = score
        application.score_notes = notes
        application.status = 'scored'
        return application

    def create(self, **fields: Any) -> Application:
        return self._persist(Application(**fields))
