from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from database.models import Base


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine; pooling options only apply to server databases."""
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20
    )


def init_db(bind: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind)
