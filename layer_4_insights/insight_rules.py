"""
Insight rules: each rule looks at the aggregate statistics and either
returns one message or None
"""
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from models.feedback import SentimentDistribution, ThemeCluster
from config.settings import settings


@dataclass(frozen=True)
class InsightContext:
    """Everything a rule may look at"""
    themes: Sequence[ThemeCluster]
    distribution: SentimentDistribution
    average_sentiment: float


@dataclass(frozen=True)
class InsightRule:
    """A named check producing at most one insight"""
    name: str
    check: Callable[[InsightContext], Optional[str]]

    def evaluate(self, context: InsightContext) -> Optional[str]:
        return self.check(context)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3, -2.25 -> -2.2 at one digit)"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def overall_tone(context: InsightContext) -> str:
    if context.average_sentiment > settings.POSITIVE_TONE_THRESHOLD:
        return "🚀 Users generally love the product! Sentiment is strongly positive."
    if context.average_sentiment < settings.NEGATIVE_TONE_THRESHOLD:
        return "⚠️ Critical Action Required: Sentiment is trending negative."
    return "ℹ️ Product sentiment is mixed/neutral. Users have specific pain points."


def problem_theme(context: InsightContext) -> Optional[str]:
    theme = next((t for t in context.themes if t.sentiment < 0), None)
    if theme is None:
        return None
    magnitude = abs(round_half_up(theme.sentiment, 1))
    return (
        f'🔴 High Negative Signal in "{theme.name}": {magnitude:g} sentiment score. '
        f'Users are complaining about this area.'
    )


def feature_signal(context: InsightContext) -> Optional[str]:
    # Only the first Features/UX theme is considered
    theme = next((t for t in context.themes if "Features" in t.name or "UX" in t.name), None)
    if theme is None or theme.count <= settings.FEATURE_SIGNAL_MIN_COUNT:
        return None
    return f"✨ {theme.count} users mentioned UX/Feature requests. Check the feedback for specific ideas."


def imbalance(context: InsightContext) -> Optional[str]:
    distribution = context.distribution
    if distribution.negative <= distribution.positive:
        return None
    ratio = 0
    if distribution.positive:
        ratio = int(round_half_up(distribution.negative / distribution.positive))
    return f"📉 Negative feedback outweighs positive by {ratio}x."


# Evaluated in this order; overall_tone always emits and stays first
DEFAULT_RULES: List[InsightRule] = [
    InsightRule("overall_tone", overall_tone),
    InsightRule("problem_theme", problem_theme),
    InsightRule("feature_signal", feature_signal),
    InsightRule("imbalance", imbalance),
]
