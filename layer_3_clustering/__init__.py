"""
Layer 3: Theme clustering (group by category, rank, keep top themes).
"""
from .theme_clusterer import ThemeClusterer, aggregate_category_counts

__all__ = [
    'ThemeClusterer',
    'aggregate_category_counts',
]
