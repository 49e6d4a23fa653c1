"""
Group classified feedback into themes and rank them by size
"""
from collections import Counter
from typing import Dict, List, Optional, Sequence

from models.feedback import FeedbackItem, ThemeCluster
from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)

# Upper bound on themes in a report
MAX_THEMES_LIMIT = 5


class ThemeClusterer:
    """Build ranked ThemeClusters from FeedbackItems"""

    def __init__(self, max_themes: Optional[int] = None, max_examples: Optional[int] = None):
        """
        Initialize clusterer

        Args:
            max_themes: Themes kept after ranking (settings.MAX_THEMES if not provided, at most MAX_THEMES_LIMIT)
            max_examples: Example texts kept per theme (settings.MAX_EXAMPLES if not provided)
        """
        max_themes = settings.MAX_THEMES if max_themes is None else max_themes
        if max_themes > MAX_THEMES_LIMIT:
            logger.warning(f"max_themes {max_themes} exceeds the limit, using {MAX_THEMES_LIMIT}")
            max_themes = MAX_THEMES_LIMIT
        self.max_themes = max_themes
        self.max_examples = settings.MAX_EXAMPLES if max_examples is None else max_examples

    @staticmethod
    def group_by_category(items: Sequence[FeedbackItem]) -> Dict[str, List[FeedbackItem]]:
        """Group items by category; dict order is the order categories first appear"""
        groups: Dict[str, List[FeedbackItem]] = {}
        for item in items:
            groups.setdefault(item.category, []).append(item)
        return groups

    def build_clusters(self, items: Sequence[FeedbackItem]) -> List[ThemeCluster]:
        """
        One cluster per category, before ranking and truncation

        Args:
            items: Classified feedback in input order

        Returns:
            Clusters in first-seen category order; counts sum to len(items)
        """
        return [
            ThemeCluster(
                name=category,
                count=len(group),
                sentiment=sum(item.sentiment_score for item in group) / len(group),
                examples=tuple(item.text for item in group[:self.max_examples]),
            )
            for category, group in self.group_by_category(items).items()
        ]

    def cluster(self, items: Sequence[FeedbackItem]) -> List[ThemeCluster]:
        """
        Ranked themes, largest first, truncated to max_themes

        sorted() is stable, so themes with equal counts keep first-seen order.

        Args:
            items: Classified feedback in input order

        Returns:
            At most max_themes clusters
        """
        if not items:
            logger.info("No feedback items to cluster")
            return []

        logger.debug(f"Category counts: {aggregate_category_counts(items)}")
        clusters = self.build_clusters(items)
        ranked = sorted(clusters, key=lambda c: c.count, reverse=True)
        top = ranked[:self.max_themes]

        dropped = len(ranked) - len(top)
        if dropped:
            logger.info(f"Keeping top {len(top)} of {len(ranked)} themes ({dropped} dropped)")

        theme_summary = ', '.join(f"{c.name} ({c.count})" for c in top)
        logger.info(f"Themes: {theme_summary}")
        return top


def aggregate_category_counts(items: Sequence[FeedbackItem]) -> Dict[str, int]:
    """
    Count items per category

    Args:
        items: Classified feedback

    Returns:
        Dictionary mapping category names to counts
    """
    return dict(Counter(item.category for item in items))
