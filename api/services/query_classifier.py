"""Query classification with AI first and keyword matching as fallback."""

import logging
from typing import Optional

from api.models import CategoryQueryResult
from api.services.ai_query_classifier import AIQueryClassifier, ClassificationFailure
from api.services.keyword_classifier import KeywordClassifier

logger = logging.getLogger(__name__)


class QueryCategoryClassifier:
    """
    Always produces a well-formed CategoryQueryResult.

    - blank query: empty result with confidence/source "none", no AI call
    - AI failure or no allowed categories: keyword fallback
    - otherwise: the AI result as reported
    """

    def __init__(
        self,
        ai_classifier: Optional[AIQueryClassifier] = None,
        keyword_classifier: Optional[KeywordClassifier] = None,
    ):
        self.ai_classifier = ai_classifier or AIQueryClassifier()
        self.keyword_classifier = keyword_classifier or KeywordClassifier()

    async def classify(self, query: Optional[str]) -> CategoryQueryResult:
        text = (query or "").strip()
        if not text:
            return CategoryQueryResult(categories=[], room=None, confidence="none", source="none")

        result = await self.ai_classifier.classify(text)

        if isinstance(result, ClassificationFailure):
            logger.info(f"Falling back to keyword matching ({result.reason})")
            return self._fallback(text)

        if not result.categories:
            logger.info("AI returned no allowed categories, falling back to keyword matching")
            return self._fallback(text)

        return result

    def _fallback(self, text: str) -> CategoryQueryResult:
        return CategoryQueryResult(
            categories=self.keyword_classifier.classify(text),
            room=None,
            confidence="fallback",
            source="keyword_matching",
        )
