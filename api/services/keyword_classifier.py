"""Deterministic keyword-based category extraction."""

import re
import logging
from typing import List

from api.utils.constants import ALLOWED_CATEGORIES, KEYWORD_PATTERNS, DEFAULT_FALLBACK_CATEGORIES

logger = logging.getLogger(__name__)


class KeywordClassifier:
    """Regex matcher over the category taxonomy; always returns something."""

    def __init__(self):
        self.patterns = [
            (category, re.compile(KEYWORD_PATTERNS[category]))
            for category in ALLOWED_CATEGORIES
        ]

    def classify(self, query: str) -> List[str]:
        """
        Extract categories mentioned in a free-text query.

        Args:
            query: Shopper's free text

        Returns:
            Matching categories in taxonomy order, or the default
            sofa/bed/dining table set when nothing matches
        """
        text = (query or "").lower()
        detected = [category for category, pattern in self.patterns if pattern.search(text)]

        if not detected:
            logger.info("No keyword match, using default categories")
            return list(DEFAULT_FALLBACK_CATEGORIES)
        return detected
