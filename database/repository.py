import logging

from sqlalchemy.orm import Session

from database.repositories import TalentRepository, StartupRepository, MatchRepository

logger = logging.getLogger(__name__)


class MatchEngineRepository:
    """Repository facade bound to one session.

    Groups the talent, startup and match repositories so a unit of work
    hands out a single object.
    """

    def __init__(self, db: Session):
        self.db = db
        self.talents = TalentRepository(db)
        self.startups = StartupRepository(db)
        self.matches = MatchRepository(db)
