"""
Layer 4: Insight generation (ordered predicate -> message rules).
"""
from .insight_rules import (
    InsightContext,
    InsightRule,
    DEFAULT_RULES,
    round_half_up
)
from .insight_generator import InsightGenerator

__all__ = [
    'InsightContext',
    'InsightRule',
    'DEFAULT_RULES',
    'round_half_up',
    'InsightGenerator',
]
