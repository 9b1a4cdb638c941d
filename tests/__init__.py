#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against an in-memory SQLite database, so no external
services are needed:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that open a database session
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base

# Fixed reference time so availability scores do not drift
FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def create_test_session_factory():
    """
    Build a sessionmaker over a fresh in-memory SQLite database.

    StaticPool keeps a single connection so every session sees the same
    in-memory tables.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed_recruitment_data(session):
    """
    Insert two jobs, one recruiter and four applications.

    Availability dates sit far in the past or future so scores do not
    depend on the wall clock. Expected auto scores: strong 100, weak 11,
    blank 52 (job "backend"), other 47 (job "ops").

    Returns:
        dict of the created ids
    """
    from datetime import date
    from database.repository import RecruitmentRepository

    repo = RecruitmentRepository(session)

    for user_id in ('cand-1', 'cand-2', 'cand-3', 'cand-4'):
        repo.users.create(user_id, role='candidate', email=f'{user_id}@example.com')
    repo.users.create('rec-1', role='recruiter', email='rec-1@example.com')

    backend = repo.jobs.create(
        title='Backend Engineer',
        company='Acme',
        experience_level='Senior',
        skills=['Python', 'SQL'],
        salary='40k - 55k €'
    )
    ops = repo.jobs.create(title='Ops Engineer', company='Acme', skills=[])

    strong = repo.applications.create(
        user_id='cand-1',
        job_id=backend.id,
        experience_level='Senior',
        skills=['python', 'postgresql', 'sql'],
        availability_date=date(2020, 1, 1),
        salary_expectation='45k',
        cover_letter='x' * 150,
        cv_path='uploads/cv-1.pdf',
        motivation_letter_path='uploads/ml-1.pdf',
        phone='0600000001'
    )
    weak = repo.applications.create(
        user_id='cand-2',
        job_id=backend.id,
        experience_level='Débutant',
        skills=['Excel'],
        availability_date=date(2099, 1, 1),
        salary_expectation='70k'
    )
    blank = repo.applications.create(user_id='cand-3', job_id=backend.id)
    other = repo.applications.create(
        user_id='cand-4',
        job_id=ops.id,
        experience_level='Senior',
        skills=['Go']
    )
    session.commit()

    return {
        'backend_job': backend.id,
        'ops_job': ops.id,
        'strong': strong.id,
        'weak': weak.id,
        'blank': blank.id,
        'other': other.id,
    }
