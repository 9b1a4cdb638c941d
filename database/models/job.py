from sqlalchemy import Column, Integer, Text, TIMESTAMP, JSON, func
from sqlalchemy.orm import relationship

from .base import Base


class Job(Base):
    __tablename__ = 'jobs'

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Core Identity
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    description = Column(Text)
    contract_type = Column(Text)  # CDI|CDD|Freelance

    # === Scoring Inputs ===
    experience_level = Column(Text)  # Débutant|Intermédiaire|Senior
    skills = Column(JSON, nullable=False, default=list)
    salary = Column(Text)  # "40k - 55k €"

    is_active = Column(Integer, nullable=False, default=1)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
