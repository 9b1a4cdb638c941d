#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The caller's identity arrives in the ``X-User-Role`` and ``X-User-Id``
headers. Whatever authenticates requests upstream (session, JWT, gateway)
is expected to set them.
"""

from functools import lru_cache
from typing import Callable, Generator, Optional
from fastapi import Header
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import get_config
from core.rbac import has_permission, has_role
from database.database import build_engine
from .exceptions import AccessDeniedException, AuthenticationRequiredException


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self):
        config = get_config()
        self.engine = build_engine(config.database.url, echo=config.database.echo)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


@lru_cache()
def get_db_manager() -> DatabaseManager:
    """Build the database manager on first use."""
    return DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_db_manager().get_session()


def get_current_role(x_user_role: Optional[str] = Header(default=None)) -> str:
    """Role of the calling user."""
    if not x_user_role:
        raise AuthenticationRequiredException("Authentication required")
    return x_user_role.strip()


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Id of the calling user."""
    if not x_user_id:
        raise AuthenticationRequiredException("Authentication required")
    return x_user_id.strip()


def require_roles(*allowed_roles: str) -> Callable[..., str]:
    """
    Coarse guard: the caller's role must be one of ``allowed_roles``.

    Usage:
        @router.get("/x")
        def x(role: str = Depends(require_roles(*RECRUITMENT_ROLES))):
            ...
    """
    def dependency(x_user_role: Optional[str] = Header(default=None)) -> str:
        role = get_current_role(x_user_role)
        if not has_role(role, allowed_roles):
            raise AccessDeniedException(f"Role '{role}' may not access this resource")
        return role

    return dependency


def require_permissions(*permissions: str) -> Callable[..., str]:
    """Fine-grained guard: the caller's role must hold every listed permission."""
    def dependency(x_user_role: Optional[str] = Header(default=None)) -> str:
        role = get_current_role(x_user_role)
        if not has_permission(role, permissions):
            raise AccessDeniedException(
                f"Role '{role}' lacks required permission(s): {', '.join(permissions)}"
            )
        return role

    return dependency
