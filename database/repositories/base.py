from typing import TypeVar

from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository:
    """Session holder shared by the recruitment repositories. Callers own the transaction."""

    def __init__(self, db: Session):
        self.db = db

    def _persist(self, instance: T) -> T:
        # Flush so autoincrement ids are available before commit
        self.db.add(instance)
        self.db.flush()
        return instance

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
