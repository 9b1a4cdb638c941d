from sqlalchemy import Column, Integer, Text, Date, TIMESTAMP, JSON, ForeignKey, func, Index
from sqlalchemy.orm import relationship

from .base import Base


class Application(Base):
    __tablename__ = 'applications'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id'), nullable=False)
    job_id = Column(Integer, ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)
    status = Column(Text, nullable=False, default='pending')  # pending|assigned|scored|interview|accepted|rejected

    # === Candidate Profile (scoring inputs) ===
    experience_level = Column(Text)
    skills = Column(JSON, nullable=False, default=list)
    availability_date = Column(Date)
    salary_expectation = Column(Text)  # "45k"
    cover_letter = Column(Text)
    cv_path = Column(Text)
    motivation_letter_path = Column(Text)
    phone = Column(Text)

    # === Review State ===
    assigned_recruiter = Column(Text, ForeignKey('users.id'))
    auto_score = Column(Integer, nullable=False, default=0)  # cached, always recomputable
    manual_score = Column(Integer)  # 0-100, set by a recruiter
    score_notes = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    job = relationship("Job", back_populates="applications")

    __table_args__ = (
        Index('idx_applications_job_id', 'job_id'),
        Index('idx_applications_assigned_recruiter', 'assigned_recruiter'),
    )
