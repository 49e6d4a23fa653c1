"""
Feedback analysis data models
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
import json

from layer_1_lexicon.lexicon_config import FALLBACK_CATEGORY

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"


def label_for_score(score: float) -> str:
    """Map a sentiment score to positive / negative / neutral by its sign"""
    if score > 0:
        return POSITIVE
    if score < 0:
        return NEGATIVE
    return NEUTRAL


@dataclass(frozen=True)
class FeedbackItem:
    """One classified feedback text"""
    id: str
    text: str  # Original, unmodified input
    sentiment_score: int
    keywords: Tuple[str, ...] = ()
    category: str = FALLBACK_CATEGORY

    @property
    def sentiment_label(self) -> str:
        return label_for_score(self.sentiment_score)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "sentimentScore": self.sentiment_score,
            "sentimentLabel": self.sentiment_label,
            "keywords": list(self.keywords),
            "category": self.category,
        }


@dataclass(frozen=True)
class ThemeCluster:
    """Items sharing a category, summarized"""
    name: str
    count: int
    sentiment: float  # Mean sentiment score of the members
    examples: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "count": self.count,
            "sentiment": self.sentiment,
            "examples": list(self.examples),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ThemeCluster":
        return cls(
            name=data["name"],
            count=data["count"],
            sentiment=data["sentiment"],
            examples=tuple(data.get("examples", [])),
        )


@dataclass(frozen=True)
class SentimentDistribution:
    """Counts of positive, negative and neutral items"""
    positive: int = 0
    negative: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral

    def to_dict(self) -> Dict[str, int]:
        return {
            POSITIVE: self.positive,
            NEGATIVE: self.negative,
            NEUTRAL: self.neutral,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Report returned by one pipeline run

    Item identifiers are not part of the report; two runs over the same
    input compare equal.
    """
    total_count: int
    average_sentiment: float
    sentiment_distribution: SentimentDistribution = field(default_factory=SentimentDistribution)
    top_themes: Tuple[ThemeCluster, ...] = ()
    actionable_insights: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to a dictionary using the report's wire field names"""
        return {
            "totalCount": self.total_count,
            "averageSentiment": self.average_sentiment,
            "sentimentDistribution": self.sentiment_distribution.to_dict(),
            "topThemes": [theme.to_dict() for theme in self.top_themes],
            "actionableInsights": list(self.actionable_insights),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        """Create report from dictionary"""
        distribution = data.get("sentimentDistribution", {})
        return cls(
            total_count=data["totalCount"],
            average_sentiment=data["averageSentiment"],
            sentiment_distribution=SentimentDistribution(
                positive=distribution.get(POSITIVE, 0),
                negative=distribution.get(NEGATIVE, 0),
                neutral=distribution.get(NEUTRAL, 0),
            ),
            top_themes=tuple(ThemeCluster.from_dict(t) for t in data.get("topThemes", [])),
            actionable_insights=tuple(data.get("actionableInsights", [])),
        )

    def to_json(self) -> str:
        """Convert report to JSON string"""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
