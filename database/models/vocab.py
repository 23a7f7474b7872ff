"""Fixed vocabularies shared by the schema and the scoring policy."""

# Ordered from earliest to most mature
STAGES = ('idea', 'mvp', 'early_stage', 'growth', 'scaling')

INDUSTRIES = (
    'Technology',
    'Healthcare',
    'Finance',
    'Education',
    'E-commerce',
    'AI/ML',
    'SaaS',
    'Consumer',
    'Enterprise',
    'Gaming',
    'Social Media',
    'Green Tech',
    'Other',
)

AVAILABILITY = ('full_time', 'part_time', 'consulting', 'not_available')

COMMITMENT = ('cofounder', 'employee', 'contractor', 'advisor')


def skill_key(skill: str) -> str:
    """Case-insensitive identity of a skill tag."""
    return skill.strip().casefold()


def sql_in(column: str, values) -> str:
    """Render a CHECK constraint body restricting column to values."""
    quoted = ", ".join("'" + v.replace("'", "''") + "'" for v in values)
    return f"{column} IN ({quoted})"


def dedupe_skills(skills) -> dict:
    """Map skill key -> first spelling seen, dropping blanks."""
    seen = {}
    for skill in skills:
        if not skill or not skill.strip():
            continue
        key = skill_key(skill)
        if key not in seen:
            seen[key] = skill.strip()
    return seen
