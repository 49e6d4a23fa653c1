"""
Rule-based insight generation over theme and sentiment statistics
"""
from typing import List, Optional, Sequence

from layer_4_insights.insight_rules import DEFAULT_RULES, InsightContext, InsightRule
from models.feedback import SentimentDistribution, ThemeCluster
from utils.logger import get_logger

logger = get_logger(__name__)


class InsightGenerator:
    """Run insight rules in order and collect the messages they emit"""

    def __init__(self, rules: Optional[Sequence[InsightRule]] = None):
        """
        Initialize generator

        Args:
            rules: Ordered rules (DEFAULT_RULES if not provided)
        """
        self.rules = list(DEFAULT_RULES if rules is None else rules)

    def generate(self, themes: Sequence[ThemeCluster],
                 distribution: SentimentDistribution,
                 average_sentiment: float) -> List[str]:
        """
        Generate insights

        Args:
            themes: Ranked themes (largest first)
            distribution: Positive/negative/neutral counts
            average_sentiment: Mean sentiment over all items

        Returns:
            Insight messages in rule order
        """
        context = InsightContext(
            themes=themes,
            distribution=distribution,
            average_sentiment=average_sentiment,
        )
        insights = []
        for rule in self.rules:
            message = rule.evaluate(context)
            if message:
                logger.debug(f"Rule {rule.name} fired")
                insights.append(message)

        logger.info(f"Generated {len(insights)} insights")
        return insights
