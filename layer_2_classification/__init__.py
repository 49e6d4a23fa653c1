"""
Layer 2: Item classification (sentiment scoring and topic assignment).
"""
from .id_generator import IdGenerator
from .classifier import ItemClassifier, TOKEN_PATTERN

__all__ = [
    'IdGenerator',
    'ItemClassifier',
    'TOKEN_PATTERN',
]
