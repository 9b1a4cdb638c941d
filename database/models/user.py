from sqlalchemy import Column, Text, TIMESTAMP, func, Index

from .base import Base


class User(Base):
    """
    User account. Only the fields the recruitment core reads are mapped.
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True)
    email = Column(Text, unique=True)
    first_name = Column(Text)
    last_name = Column(Text)
    phone = Column(Text)
    role = Column(Text, nullable=False, default='candidate')  # candidate|employee|recruiter|manager|hr|admin

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_users_role', 'role'),
    )
