"""
Immutable lexicon: topic keywords plus positive/negative word sets
"""
import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple

from layer_1_lexicon.lexicon_config import (
    TOPIC_KEYWORDS,
    POSITIVE_WORDS,
    NEGATIVE_WORDS,
)
from config.settings import settings
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Lexicon:
    """
    Read-only lookup tables used by the classifier

    Build one with Lexicon.default() or Lexicon.from_config() and pass it to
    the classifier. Nothing mutates a lexicon after construction.
    """
    topic_table: Mapping[str, Tuple[str, ...]]
    positive_words: FrozenSet[str]
    negative_words: FrozenSet[str]

    @classmethod
    def from_config(cls,
                    topic_keywords: Mapping[str, Iterable[str]],
                    positive_words: Iterable[str],
                    negative_words: Iterable[str]) -> "Lexicon":
        """
        Build a lexicon from plain mapping/sequence data

        Args:
            topic_keywords: Topic name -> keywords, in priority order
            positive_words: Words that raise the sentiment score
            negative_words: Words that lower the sentiment score

        Returns:
            Lexicon instance
        """
        table = {
            topic: tuple(keyword.lower() for keyword in keywords)
            for topic, keywords in topic_keywords.items()
        }
        return cls(
            topic_table=MappingProxyType(table),
            positive_words=frozenset(word.lower() for word in positive_words),
            negative_words=frozenset(word.lower() for word in negative_words),
        )

    @classmethod
    def default(cls) -> "Lexicon":
        """Lexicon built from the tables in lexicon_config.py"""
        return cls.from_config(TOPIC_KEYWORDS, POSITIVE_WORDS, NEGATIVE_WORDS)

    def topic_keywords(self) -> Mapping[str, Tuple[str, ...]]:
        return self.topic_table

    def topics(self) -> list[str]:
        return list(self.topic_table.keys())

    def is_positive(self, word: str) -> bool:
        return word in self.positive_words

    def is_negative(self, word: str) -> bool:
        return word in self.negative_words


def _word_list(value, name: str) -> list:
    """Return value as a list of strings, or raise ValueError"""
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValueError(f"'{name}' must be a list of strings")
    if not all(isinstance(word, str) for word in value):
        raise ValueError(f"'{name}' must only contain strings")
    return list(value)


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """
    Load the lexicon from a JSON file, or use the built-in tables

    The file may hold any of "topic_keywords", "positive_words" and
    "negative_words"; missing keys use the built-in values. A file that
    cannot be read or parsed is logged and the built-in lexicon is used.

    Args:
        path: JSON file path (defaults to settings.LEXICON_FILE)

    Returns:
        Lexicon instance
    """
    path = path or settings.LEXICON_FILE
    if not path:
        return Lexicon.default()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("lexicon file must contain a JSON object")

        topic_keywords = data.get("topic_keywords", TOPIC_KEYWORDS)
        if not isinstance(topic_keywords, dict):
            raise ValueError("'topic_keywords' must map topic names to keyword lists")

        lexicon = Lexicon.from_config(
            {
                topic: _word_list(keywords, f"topic_keywords.{topic}")
                for topic, keywords in topic_keywords.items()
            },
            _word_list(data.get("positive_words", POSITIVE_WORDS), "positive_words"),
            _word_list(data.get("negative_words", NEGATIVE_WORDS), "negative_words"),
        )
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"Could not load lexicon from {path}: {e}. Using built-in lexicon")
        return Lexicon.default()

    if not lexicon.topic_table:
        logger.warning(f"Lexicon {path} has no topics, all feedback will be categorized as General")

    logger.info(
        f"Loaded lexicon from {path}: {len(lexicon.topic_table)} topics, "
        f"{len(lexicon.positive_words)} positive / {len(lexicon.negative_words)} negative words"
    )
    return lexicon
