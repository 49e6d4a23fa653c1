"""
Layer 1: Lexicon Store (fixed topic taxonomy and sentiment word sets).
"""
from .lexicon_config import (
    TOPIC_KEYWORDS,
    POSITIVE_WORDS,
    NEGATIVE_WORDS,
    FALLBACK_CATEGORY
)
from .lexicon import Lexicon, load_lexicon

__all__ = [
    'TOPIC_KEYWORDS',
    'POSITIVE_WORDS',
    'NEGATIVE_WORDS',
    'FALLBACK_CATEGORY',
    'Lexicon',
    'load_lexicon',
]
