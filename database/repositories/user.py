import logging
from typing import Optional

from sqlalchemy import select

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: str) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, user_id: str, role: str = 'candidate', **fields) -> User:
        return self._persist(User(id=user_id, role=role, **fields))
