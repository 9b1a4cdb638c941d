from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository
from database.repositories.application import ApplicationRepository
from database.repositories.user import UserRepository

__all__ = [
    'BaseRepository',
    'JobRepository',
    'ApplicationRepository',
    'UserRepository',
]
