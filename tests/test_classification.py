"""
Unit tests for Layer 2: Item Classification
Tests tokenizing, scoring, labelling, categorizing and batch ordering
"""
import sys
import os
import threading
from unittest.mock import patch

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from layer_1_lexicon.lexicon import Lexicon
from layer_2_classification.classifier import ItemClassifier
from layer_2_classification.id_generator import IdGenerator
from models.feedback import FeedbackItem, label_for_score
from config.settings import settings


class TestTokenize:
    """Test word tokenization"""

    def test_lowercases_and_strips_punctuation(self):
        tokens = ItemClassifier.tokenize("Hello, World! It's 2FA...")
        assert tokens == ["hello", "world", "it", "s", "2fa"]

    def test_empty_and_punctuation_only(self):
        assert ItemClassifier.tokenize("") == []
        assert ItemClassifier.tokenize("!!! ... ???") == []

    def test_non_ascii_is_separator(self):
        assert ItemClassifier.tokenize("great😀app") == ["great", "app"]


class TestScoring:
    """Test additive sentiment scoring"""

    def test_positive_words_add_weight(self):
        classifier = ItemClassifier()
        score, keywords = classifier.score(["i", "love", "it", "amazing"])
        assert score == 4
        assert keywords == ["love", "amazing"]

    def test_negative_words_subtract_weight(self):
        classifier = ItemClassifier()
        score, keywords = classifier.score(["slow", "and", "buggy"])
        assert score == -4
        assert keywords == ["slow", "buggy"]

    def test_mixed_words_cancel(self):
        """Additive, not majority vote: one positive and one negative give zero"""
        classifier = ItemClassifier()
        score, keywords = classifier.score(["great", "but", "terrible"])
        assert score == 0
        assert keywords == ["great", "terrible"]

    def test_repeated_words_count_each_time(self):
        classifier = ItemClassifier()
        score, keywords = classifier.score(["bad", "bad", "bad"])
        assert score == -6
        assert keywords == ["bad", "bad", "bad"]

    def test_weight_from_settings(self):
        with patch.object(settings, 'SENTIMENT_WEIGHT', 3):
            classifier = ItemClassifier()
        score, _ = classifier.score(["great", "great", "awful"])
        assert score == 3

    def test_non_positive_weight_uses_default(self):
        """A zero or negative weight would flatten or invert every score"""
        for weight in (0, -2):
            with patch.object(settings, 'SENTIMENT_WEIGHT', weight):
                classifier = ItemClassifier()
            score, _ = classifier.score(["great", "awful", "awful"])
            assert classifier.weight == 2
            assert score == -2


class TestLabel:
    """Test label derivation from score"""

    def test_label_trichotomy(self):
        assert label_for_score(4) == "positive"
        assert label_for_score(0.5) == "positive"
        assert label_for_score(-2) == "negative"
        assert label_for_score(0) == "neutral"

    def test_item_label_follows_score(self):
        item = FeedbackItem(id="x", text="t", sentiment_score=-2)
        assert item.sentiment_label == "negative"


class TestCategorize:
    """Test topic assignment"""

    def test_multi_word_keyword(self):
        classifier = ItemClassifier()
        assert classifier.categorize("I love the new dark mode, it looks amazing!") == "User Experience (UX)"

    def test_substring_match(self):
        """Keywords match inside longer words ("ui" in "build")"""
        classifier = ItemClassifier()
        assert classifier.categorize("The new build") == "User Experience (UX)"

    def test_tie_keeps_first_topic(self):
        classifier = ItemClassifier()
        # One Pricing keyword ("price"), one UX keyword ("menu")
        assert classifier.categorize("The price of the menu") == "Pricing & Value"

    def test_shared_keyword_tie(self):
        """'email' belongs to Customer Support and Authentication; first declared wins"""
        classifier = ItemClassifier()
        assert classifier.categorize("I never got an email") == "Customer Support"

    def test_more_matches_win(self):
        classifier = ItemClassifier()
        text = "Price is fine but the button layout and menu design"
        assert classifier.categorize(text) == "User Experience (UX)"

    def test_repeated_keyword_counts_once(self):
        """Each keyword counts once however often it appears"""
        classifier = ItemClassifier()
        # Pricing: "price" x3 is one match; UX: "menu" and "button" are two
        assert classifier.categorize("price price price menu button") == "User Experience (UX)"

    def test_no_match_is_general(self):
        classifier = ItemClassifier()
        assert classifier.categorize("Hello there") == "General"
        assert classifier.categorize("") == "General"

    def test_empty_taxonomy_is_general(self):
        classifier = ItemClassifier(lexicon=Lexicon.from_config({}, [], []))
        assert classifier.categorize("The price is too expensive") == "General"

    def test_custom_lexicon(self):
        lexicon = Lexicon.from_config({"Widgets": ["widget"]}, ["shiny"], ["dull"])
        classifier = ItemClassifier(lexicon=lexicon)
        item = classifier.classify("Shiny new Widget")
        assert item.category == "Widgets"
        assert item.sentiment_score == 2


class TestClassify:
    """Test full single-item classification"""

    def test_positive_item(self):
        item = ItemClassifier().classify("I love the new dark mode, it looks amazing!")
        assert item.text == "I love the new dark mode, it looks amazing!"
        assert item.sentiment_score == 4
        assert item.sentiment_label == "positive"
        assert item.keywords == ("love", "amazing")
        assert item.category == "User Experience (UX)"

    def test_crash_report(self):
        item = ItemClassifier().classify("The app crashes every time I try to upload a photo on Android.")
        assert item.sentiment_label == "negative"
        assert item.category == "Performance & Stability"

    def test_empty_text(self):
        item = ItemClassifier().classify("")
        assert item.sentiment_score == 0
        assert item.sentiment_label == "neutral"
        assert item.category == "General"
        assert item.keywords == ()

    def test_emoji_and_mixed_scripts(self):
        item = ItemClassifier().classify("😀😡 Привет 你好")
        assert item.sentiment_label == "neutral"
        assert item.category == "General"

    def test_item_is_immutable(self):
        item = ItemClassifier().classify("great")
        with pytest.raises(AttributeError):
            item.sentiment_score = -10


class TestClassifyBatch:
    """Test batch classification and identifiers"""

    def test_empty_batch(self):
        assert ItemClassifier().classify_batch([]) == []

    def test_ids_unique(self):
        items = ItemClassifier().classify_batch(["same text"] * 50)
        assert len({item.id for item in items}) == 50

    def test_parallel_keeps_input_order(self):
        texts = [f"Feedback number {i} is {'great' if i % 2 else 'bad'}" for i in range(40)]

        sequential = ItemClassifier(max_workers=1).classify_batch(texts)
        parallel = ItemClassifier(max_workers=4).classify_batch(texts)

        assert [item.text for item in parallel] == texts
        assert [item.sentiment_score for item in parallel] == [item.sentiment_score for item in sequential]
        assert len({item.id for item in parallel}) == len(texts)


class TestIdGenerator:
    """Test run-unique identifier generation"""

    def test_sequential_ids(self):
        generator = IdGenerator(prefix="run")
        assert generator.next_id() == "run-000001"
        assert generator() == "run-000002"

    def test_random_prefix_per_generator(self):
        assert IdGenerator().prefix != IdGenerator().prefix

    def test_concurrent_ids_never_collide(self):
        generator = IdGenerator()
        ids = []
        lock = threading.Lock()

        def worker():
            local = [generator.next_id() for _ in range(250)]
            with lock:
                ids.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ids) == 2000
        assert len(set(ids)) == 2000
