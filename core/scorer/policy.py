#!/usr/bin/env python3
"""
Scoring policy tables.

These are policy constants rather than derived values:
- STAGE_SKILLS: skills a startup at each stage typically needs, used when a
  posting lists no sought skills.
- INDUSTRY_KEYWORDS: terms that signal experience or interest in an industry.
  The industry's own name is the direct signal and is not repeated here.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from database.models import INDUSTRIES

STAGE_SKILLS: Dict[str, Tuple[str, ...]] = {
    'idea': ('Product Management', 'UI/UX Design'),
    'mvp': ('React', 'TypeScript', 'UI/UX Design', 'Product Management'),
    'early_stage': ('Marketing', 'Sales', 'DevOps', 'Product Management'),
    'growth': ('Marketing', 'Sales', 'Data Science', 'Operations', 'Finance'),
    'scaling': ('Operations', 'Finance', 'Legal', 'DevOps', 'Business Development'),
}

INDUSTRY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    'Technology': (
        'tech', 'software', 'engineering', 'developer', 'programming',
        'javascript', 'typescript', 'react', 'node.js', 'python',
        'cloud computing', 'devops', 'mobile development',
    ),
    'Healthcare': (
        'health', 'health tech', 'medical', 'medicine', 'clinical', 'hospital',
        'patient', 'biotech', 'pharma', 'healthtech',
    ),
    'Finance': (
        'fintech', 'banking', 'payments', 'investment', 'trading', 'accounting',
        'insurance', 'financial',
    ),
    'Education': (
        'edtech', 'teaching', 'educator', 'learning', 'school', 'university',
        'curriculum', 'tutoring',
    ),
    'E-commerce': (
        'ecommerce', 'online retail', 'retail', 'marketplace', 'shopify',
        'dropshipping', 'checkout',
    ),
    'AI/ML': (
        'ai', 'ml', 'artificial intelligence', 'machine learning', 'deep learning',
        'data science', 'nlp', 'computer vision', 'llm',
    ),
    'SaaS': (
        'software as a service', 'b2b software', 'subscription', 'cloud computing',
        'platform',
    ),
    'Consumer': (
        'consumer apps', 'consumer products', 'd2c', 'dtc', 'brand', 'mobile apps',
    ),
    'Enterprise': (
        'b2b', 'enterprise software', 'erp', 'crm', 'business development', 'sales',
    ),
    'Gaming': (
        'games', 'game development', 'game design', 'esports', 'unity',
        'unreal engine',
    ),
    'Social Media': (
        'social network', 'community', 'content creator', 'influencer', 'creator economy',
    ),
    'Green Tech': (
        'climate', 'cleantech', 'clean energy', 'renewable', 'solar', 'sustainability',
        'carbon', 'climate tech',
    ),
    'Other': (),
}


def build_keyword_table(extra: Optional[Mapping[str, List[str]]] = None) -> Dict[str, Tuple[str, ...]]:
    """Merge configured extra keywords into the built-in table."""
    table = dict(INDUSTRY_KEYWORDS)
    for industry, keywords in (extra or {}).items():
        if industry not in INDUSTRIES:
            raise ValueError(f"Unknown industry in extra keywords: {industry}")
        table[industry] = tuple(dict.fromkeys(table.get(industry, ()) + tuple(keywords)))
    return table

