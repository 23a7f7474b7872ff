from database.repositories.base import BaseRepository
from database.repositories.profile import TalentRepository
from database.repositories.startup import StartupRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'TalentRepository',
    'StartupRepository',
    'MatchRepository',
]
