#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that need no match store
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database Setup:
    DB-backed tests run against an in-memory SQLite engine created per test
    case, so no external database is needed. The schema uses portable column
    types and the same constraints as PostgreSQL.
"""

import uuid
from typing import Any, Iterable, Optional

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base, MatchRecord
from database.uow import match_uow


def create_test_engine() -> Engine:
    """
    In-memory SQLite engine with all tables created.

    StaticPool keeps one connection so every session sees the same database.
    """
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    return sessionmaker(
        bind=engine or create_test_engine(),
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def seed_talent(
    session_factory,
    skills: Iterable[str] = (),
    bio: str = "",
    display_name: str = "Test Talent",
    talent_id: Any = None,
) -> str:
    """Insert a talent profile and return its id as a string."""
    with match_uow(session_factory) as repo:
        talent = repo.talents.create_talent_profile(
            skills=skills,
            bio=bio,
            display_name=display_name,
            talent_id=talent_id,
        )
        return str(talent.id)


def seed_startup(
    session_factory,
    industry: str = "Technology",
    stage: str = "idea",
    skills: Iterable[str] = (),
    founder_id: Any = None,
    name: str = "Test Startup",
    startup_id: Any = None,
) -> str:
    """Insert a startup posting and return its id as a string."""
    with match_uow(session_factory) as repo:
        startup = repo.startups.create_startup_posting(
            founder_id=uuid.UUID(str(founder_id)) if founder_id else uuid.uuid4(),
            name=name,
            industry=industry,
            stage=stage,
            skills=skills,
            startup_id=startup_id,
        )
        return str(startup.id)


def count_match_records(session_factory, talent_id: Any, startup_id: Any) -> int:
    """Number of stored match rows for one pair."""
    with match_uow(session_factory) as repo:
        stmt = select(func.count()).select_from(MatchRecord).where(
            MatchRecord.talent_id == uuid.UUID(str(talent_id)),
            MatchRecord.startup_id == uuid.UUID(str(startup_id)),
        )
        return repo.db.execute(stmt).scalar_one()
