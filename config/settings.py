"""
Application settings and configuration

This file contains all the settings for the feedback analyser.
Think of it like a control panel where you can tune how feedback is scored,
grouped and summarized.

Most settings can be changed by creating a .env file in the project root.
If a setting isn't in .env, it uses the default value shown here.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
load_dotenv()


class Settings:
    """
    Application configuration settings

    Values are read once at import time. The pipeline only reads them,
    it never changes them while running.
    """

    # ============================================================
    # Lexicon Settings
    # ============================================================
    # Optional JSON file with topic keywords and sentiment words.
    # Leave empty to use the tables built into layer_1_lexicon/lexicon_config.py
    LEXICON_FILE = os.getenv("LEXICON_FILE", "")

    # ============================================================
    # Scoring Settings
    # ============================================================
    # Points added for every positive word and removed for every negative word.
    # Same value both ways so the scale stays symmetric.
    SENTIMENT_WEIGHT = int(os.getenv("SENTIMENT_WEIGHT", "2"))

    # Threads used to classify items (1 = classify one after another)
    CLASSIFIER_MAX_WORKERS = int(os.getenv("CLASSIFIER_MAX_WORKERS", "1"))

    # ============================================================
    # Theme Settings
    # ============================================================
    MAX_THEMES = int(os.getenv("MAX_THEMES", "5"))  # Themes kept in the report (at most 5)
    MAX_EXAMPLES = int(os.getenv("MAX_EXAMPLES", "3"))  # Example texts per theme

    # ============================================================
    # Insight Settings
    # ============================================================
    # Average sentiment above this is "strongly positive",
    # below the negative one is "trending negative", anything else is mixed.
    POSITIVE_TONE_THRESHOLD = float(os.getenv("POSITIVE_TONE_THRESHOLD", "0.5"))
    NEGATIVE_TONE_THRESHOLD = float(os.getenv("NEGATIVE_TONE_THRESHOLD", "-0.5"))
    # A Features/UX theme needs more members than this to be called out
    FEATURE_SIGNAL_MIN_COUNT = int(os.getenv("FEATURE_SIGNAL_MIN_COUNT", "2"))

    # ============================================================
    # Logging Settings
    # ============================================================
    # Options: DEBUG (very detailed), INFO (normal), WARNING (only problems), ERROR (only errors)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", "")  # Empty = log to console only

    @staticmethod
    def ensure_directories():
        """
        Create the log folder if a log file is configured

        Returns:
            None
        """
        log_dir = os.path.dirname(Settings.LOG_FILE)
        if Settings.LOG_FILE and log_dir:
            os.makedirs(log_dir, exist_ok=True)


# Global settings instance
settings = Settings()
