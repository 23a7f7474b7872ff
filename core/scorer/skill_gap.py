#!/usr/bin/env python3
"""
Skill Gap Analysis - which sought skills a startup's team still lacks.

Used by founders to see what the next hire should bring, and by the match
explanation to show which gaps a talent would fill.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core.config_loader import ScorerConfig
from core.scorer.dto import StartupPostingDTO
from core.scorer.policy import STAGE_SKILLS
from core.scorer.service import resolve_sought_skills
from core.scorer.skill_score import normalize_skills
from database.models import dedupe_skills, skill_key

# Primary role suggestion for a missing skill
SKILL_ROLE_MAP = {
    'UI/UX Design': 'UI/UX Designer',
    'Product Management': 'Product Manager',
    'Marketing': 'Marketing Lead',
    'Sales': 'Sales Lead',
    'Finance': 'CFO',
    'Legal': 'Legal Counsel',
    'DevOps': 'DevOps Engineer',
    'Machine Learning': 'ML Engineer',
    'Data Science': 'Data Scientist',
    'Mobile Development': 'Mobile Developer',
    'Cloud Computing': 'Cloud Architect',
    'Blockchain': 'Blockchain Developer',
    'Healthcare': 'Healthcare Specialist',
    'Operations': 'Operations Manager',
    'Business Development': 'BD Lead',
    'React': 'Frontend Engineer',
    'TypeScript': 'Full-Stack Developer',
    'Node.js': 'Backend Engineer',
    'Python': 'Backend/ML Engineer',
}
_ROLE_BY_KEY = {skill_key(k): v for k, v in SKILL_ROLE_MAP.items()}


@dataclass
class SkillGapAnalysis:
    required_skills: List[str]
    team_skills: List[str]
    missing_skills: List[str]
    completion_percentage: int
    suggested_roles: List[str] = field(default_factory=list)
    stage_recommendations: List[str] = field(default_factory=list)


def completion_message(completion_percentage: int, suggested_roles: List[str]) -> str:
    if completion_percentage >= 100:
        return "Team covers every sought skill."
    if completion_percentage >= 80:
        return "Team is well-rounded; consider specialists as you grow."
    if completion_percentage >= 60:
        next_role = suggested_roles[0] if suggested_roles else "a specialist"
        return f"Good progress; a {next_role} would close the main gap."
    if completion_percentage >= 40:
        return "Core team is forming; decide which gaps matter most."
    return "Most sought skills are still open."


def calculate_skill_gap(
    startup: StartupPostingDTO,
    team_skills: Iterable[str] = (),
    config: Optional[ScorerConfig] = None
) -> SkillGapAnalysis:
    config = config or ScorerConfig()
    sought, _ = resolve_sought_skills(startup, config)

    required = list(dedupe_skills(sought).values())
    team = list(dedupe_skills(team_skills).values())
    team_keys = normalize_skills(team)

    missing = [s for s in required if skill_key(s) not in team_keys]
    covered = len(required) - len(missing)
    completion = (200 * covered + len(required)) // (2 * len(required)) if required else 100

    roles = []
    for skill in missing:
        role = _ROLE_BY_KEY.get(skill_key(skill))
        if role and role not in roles:
            roles.append(role)

    stage_recommendations = [
        s for s in STAGE_SKILLS.get(startup.stage, ()) if skill_key(s) not in team_keys
    ]

    return SkillGapAnalysis(
        required_skills=required,
        team_skills=team,
        missing_skills=missing,
        completion_percentage=completion,
        suggested_roles=roles,
        stage_recommendations=stage_recommendations,
    )
