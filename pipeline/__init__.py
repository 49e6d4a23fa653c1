"""
Feedback analysis pipeline entry points.
"""
from .run_analysis import (
    analyze_feedback,
    split_feedback_lines,
    compute_distribution,
    get_default_lexicon
)

__all__ = [
    'analyze_feedback',
    'split_feedback_lines',
    'compute_distribution',
    'get_default_lexicon',
]
