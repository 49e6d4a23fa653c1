"""
Run the full analysis: classify -> cluster -> insights -> report
"""
from typing import List, Optional, Sequence

from layer_1_lexicon.lexicon import Lexicon, load_lexicon
from layer_2_classification.classifier import ItemClassifier
from layer_2_classification.id_generator import IdGenerator
from layer_3_clustering.theme_clusterer import ThemeClusterer
from layer_4_insights.insight_generator import InsightGenerator
from models.feedback import (
    AnalysisResult,
    FeedbackItem,
    SentimentDistribution,
    POSITIVE,
    NEGATIVE,
    NEUTRAL,
)
from utils.logger import get_logger

logger = get_logger(__name__)

_default_lexicon: Optional[Lexicon] = None


def get_default_lexicon() -> Lexicon:
    """Lexicon loaded once from settings and reused by every run"""
    global _default_lexicon
    if _default_lexicon is None:
        _default_lexicon = load_lexicon()
    return _default_lexicon


def split_feedback_lines(raw_text: str) -> List[str]:
    """
    Split pasted multi-line text into feedback items

    Args:
        raw_text: One feedback item per line

    Returns:
        Non-blank lines in original order, text left as entered
    """
    return [line for line in raw_text.splitlines() if line.strip()]


def compute_distribution(items: Sequence[FeedbackItem]) -> SentimentDistribution:
    labels = [item.sentiment_label for item in items]
    return SentimentDistribution(
        positive=labels.count(POSITIVE),
        negative=labels.count(NEGATIVE),
        neutral=labels.count(NEUTRAL),
    )


def analyze_feedback(texts: Sequence[str],
                     lexicon: Optional[Lexicon] = None,
                     max_workers: Optional[int] = None) -> AnalysisResult:
    """
    Analyze a batch of feedback texts

    Each call is a full recomputation; nothing is kept between calls.

    Args:
        texts: Feedback texts (blank lines already removed by the caller)
        lexicon: Lexicon to use (the settings-configured lexicon if not provided)
        max_workers: Classification threads (settings.CLASSIFIER_MAX_WORKERS if not provided)

    Returns:
        AnalysisResult report
    """
    classifier = ItemClassifier(
        lexicon=lexicon or get_default_lexicon(),
        id_generator=IdGenerator(),
        max_workers=max_workers,
    )
    items = classifier.classify_batch(list(texts))

    total = len(items)
    average_sentiment = sum(item.sentiment_score for item in items) / total if total > 0 else 0
    distribution = compute_distribution(items)

    themes = ThemeClusterer().cluster(items)
    insights = InsightGenerator().generate(themes, distribution, average_sentiment)

    logger.info(
        f"Analyzed {total} items: avg sentiment {average_sentiment:.2f}, "
        f"{distribution.positive} positive / {distribution.negative} negative / "
        f"{distribution.neutral} neutral, {len(themes)} themes"
    )

    return AnalysisResult(
        total_count=total,
        average_sentiment=average_sentiment,
        sentiment_distribution=distribution,
        top_themes=tuple(themes),
        actionable_insights=tuple(insights),
    )
