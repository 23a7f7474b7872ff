from .base import Base
from .vocab import STAGES, INDUSTRIES, AVAILABILITY, COMMITMENT, skill_key, dedupe_skills
from .talent import TalentProfile, TalentSkill
from .startup import StartupPosting, StartupSkill
from .match import MatchRecord

__all__ = [
    'Base',
    'STAGES',
    'INDUSTRIES',
    'AVAILABILITY',
    'COMMITMENT',
    'skill_key',
    'dedupe_skills',
    'TalentProfile',
    'TalentSkill',
    'StartupPosting',
    'StartupSkill',
    'MatchRecord',
]
