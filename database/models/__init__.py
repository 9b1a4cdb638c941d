from .base import Base
from .user import User
from .job import Job
from .application import Application

__all__ = [
    'Base',
    'User',
    'Job',
    'Application',
]
