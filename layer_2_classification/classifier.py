"""
Keyword-based feedback classifier: sentiment score, label and topic for each text
"""
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from layer_1_lexicon.lexicon import Lexicon
from layer_1_lexicon.lexicon_config import FALLBACK_CATEGORY
from layer_2_classification.id_generator import IdGenerator
from models.feedback import FeedbackItem, label_for_score
from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)

# Runs of ASCII letters, digits and underscore
TOKEN_PATTERN = re.compile(r'\w+', re.ASCII)

DEFAULT_SENTIMENT_WEIGHT = 2


class ItemClassifier:
    """Turn raw feedback text into scored, categorized FeedbackItems"""

    def __init__(self, lexicon: Optional[Lexicon] = None,
                 id_generator: Optional[IdGenerator] = None,
                 max_workers: Optional[int] = None):
        """
        Initialize classifier

        Args:
            lexicon: Lexicon to classify against (built-in lexicon if not provided)
            id_generator: Identifier source (a fresh one if not provided)
            max_workers: Threads for classify_batch (settings.CLASSIFIER_MAX_WORKERS if not provided)
        """
        self.lexicon = lexicon or Lexicon.default()
        self.id_generator = id_generator or IdGenerator()
        self.max_workers = max_workers or settings.CLASSIFIER_MAX_WORKERS
        self.weight = settings.SENTIMENT_WEIGHT
        if self.weight <= 0:
            logger.warning(f"SENTIMENT_WEIGHT must be positive, got {self.weight}. Using {DEFAULT_SENTIMENT_WEIGHT}")
            self.weight = DEFAULT_SENTIMENT_WEIGHT

    @staticmethod
    def tokenize(text: str) -> List[str]:
        return TOKEN_PATTERN.findall(text.lower())

    def score(self, tokens: Sequence[str]) -> Tuple[int, List[str]]:
        """
        Additive sentiment score

        Every positive word adds the weight, every negative word removes it.
        Matched words are returned in the order they appear.

        Args:
            tokens: Lower-cased word tokens

        Returns:
            Tuple of (score, matched keywords)
        """
        score = 0
        keywords = []
        for token in tokens:
            if self.lexicon.is_positive(token):
                score += self.weight
                keywords.append(token)
            elif self.lexicon.is_negative(token):
                score -= self.weight
                keywords.append(token)
        return score, keywords

    def categorize(self, text: str) -> str:
        """
        Pick the topic with the most keywords contained in the text

        Only a strictly higher match count replaces the current best topic,
        so ties go to the topic declared first.

        Args:
            text: Original feedback text

        Returns:
            Topic name, or the fallback category when nothing matches
        """
        lowered = text.lower()
        category = FALLBACK_CATEGORY
        max_matches = 0

        for topic, keywords in self.lexicon.topic_keywords().items():
            matches = sum(1 for keyword in keywords if keyword in lowered)
            if matches > max_matches:
                max_matches = matches
                category = topic

        return category

    def classify(self, text: str) -> FeedbackItem:
        """
        Classify a single feedback text

        Args:
            text: Raw feedback text

        Returns:
            FeedbackItem with score, keywords and category
        """
        score, keywords = self.score(self.tokenize(text))
        item = FeedbackItem(
            id=self.id_generator.next_id(),
            text=text,
            sentiment_score=score,
            keywords=tuple(keywords),
            category=self.categorize(text),
        )
        logger.debug(f"Classified {item.id}: {label_for_score(score)} ({score}), {item.category}")
        return item

    def classify_batch(self, texts: Sequence[str]) -> List[FeedbackItem]:
        """
        Classify many texts, keeping input order

        Args:
            texts: Raw feedback texts

        Returns:
            FeedbackItems in the same order as texts
        """
        if not texts:
            logger.info("No feedback to classify")
            return []

        if self.max_workers > 1 and len(texts) > 1:
            logger.info(f"Classifying {len(texts)} items with {self.max_workers} workers")
            # Executor.map yields results in submission order
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(self.classify, texts))

        logger.info(f"Classifying {len(texts)} items")
        return [self.classify(text) for text in texts]
