"""
Built-in lexicon for feedback classification
Defines the 6 topic categories with their keywords and the sentiment word sets
"""

# Category used when no topic keyword matches
FALLBACK_CATEGORY = "General"

# Topic definitions, in priority order (earlier topics win ties)
# Keywords are matched as substrings of the lower-cased text, so multi-word
# keywords like "dark mode" are allowed
TOPIC_KEYWORDS = {
    "Pricing & Value": [
        "price", "cost", "expensive", "cheap", "subscription", "plan",
        "billing", "charge", "value", "worth",
    ],
    "User Experience (UX)": [
        "ui", "ux", "interface", "button", "click", "menu", "navigation",
        "layout", "design", "color", "dark mode",
    ],
    "Performance & Stability": [
        "slow", "lag", "crash", "bug", "error", "loading", "fast", "speed",
        "performance", "stable",
    ],
    "Customer Support": [
        "support", "help", "service", "chat", "agent", "email", "response",
        "rude", "polite", "ticket",
    ],
    "Authentication": [
        "login", "signup", "password", "auth", "register", "account", "email",
        "verify", "2fa",
    ],
    "Features": [
        "feature", "missing", "add", "request", "option", "setting",
        "customization",
    ],
}

# Sentiment words are matched against whole tokens, so common inflections
# of the base words are listed next to them
POSITIVE_WORDS = [
    "great", "good", "love", "loved", "loves", "amazing", "excellent", "best",
    "fantastic", "fast", "easy", "helpful", "nice", "clean", "smooth",
    "perfect", "worth", "cheap", "value", "stable", "secure", "beautiful",
    "fun",
]

NEGATIVE_WORDS = [
    "bad", "terrible", "hate", "hated", "awful", "worst", "slow", "hard",
    "difficult", "confusing", "ugly", "bug", "bugs", "buggy", "crash",
    "crashes", "crashed", "crashing", "error", "errors", "rude", "expensive",
    "lag", "laggy", "failed", "broken", "mess", "annoying", "boring",
]
