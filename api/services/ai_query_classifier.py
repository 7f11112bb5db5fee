"""LLM-backed query classification constrained to the category taxonomy."""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import openai
from pydantic import BaseModel, ValidationError

from config import settings
from api.models import CategoryQueryResult
from api.utils.constants import (
    ALLOWED_CATEGORIES,
    CATEGORY_SYNONYMS,
    ROOM_CATEGORIES,
    QUERY_CLASSIFICATION_PROMPT,
)

logger = logging.getLogger(__name__)

_CODE_FENCE_START = re.compile(r"^\s*```[a-zA-Z]*\s*")
_CODE_FENCE_END = re.compile(r"\s*```\s*$")
_MODEL_CONFIDENCES = ("high", "medium", "low")


class AIProviderError(Exception):
    """Raised by a text generator when the provider call cannot produce text."""


@dataclass
class ClassificationFailure:
    reason: str
    detail: str = ""


class TextGenerator(ABC):
    """Prompt in, text out. Implementations raise on any provider problem."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        raise NotImplementedError


class OpenAITextGenerator(TextGenerator):
    """Chat-completion generator backed by the OpenAI async client."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.client = openai.AsyncOpenAI(api_key=self.api_key) if self.api_key else None

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def generate(self, prompt: str) -> str:
        if self.client is None:
            raise AIProviderError("OPENAI_API_KEY is not configured")

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=settings.AI_TEMPERATURE,
                max_tokens=settings.AI_MAX_TOKENS,
            )
        except openai.OpenAIError as e:
            raise AIProviderError(f"OpenAI request failed: {str(e)}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise AIProviderError("OpenAI returned an empty response")
        return content


class AIResponsePayload(BaseModel):
    """Shape the model is asked to return. Only `categories` is required."""
    categories: List[Any]
    room: Optional[Any] = None
    confidence: Optional[Any] = None


def build_prompt(query: str) -> str:
    categories = "\n".join(f"- {category}" for category in ALLOWED_CATEGORIES)
    synonyms = "\n".join(f"- {phrase} -> {category}" for phrase, category in CATEGORY_SYNONYMS.items())
    rooms = "\n".join(f"- {room}: {', '.join(allowed)}" for room, allowed in ROOM_CATEGORIES.items())
    return QUERY_CLASSIFICATION_PROMPT.format(
        categories=categories,
        synonyms=synonyms,
        rooms=rooms,
        query=query,
    )


def strip_code_fences(text: str) -> str:
    text = _CODE_FENCE_START.sub("", text or "")
    return _CODE_FENCE_END.sub("", text).strip()


def filter_categories(raw_categories: List[Any]) -> List[str]:
    """Keep allowed categories only (case-insensitive), canonical spelling, no repeats."""
    allowed = {category.lower(): category for category in ALLOWED_CATEGORIES}
    kept = []
    for entry in raw_categories:
        if not isinstance(entry, str):
            continue
        category = allowed.get(entry.strip().lower())
        if category is None:
            logger.info(f"Dropping out-of-vocabulary category from AI response: {entry!r}")
            continue
        if category not in kept:
            kept.append(category)
    return kept


def normalize_room(raw_room: Any) -> Optional[str]:
    if not isinstance(raw_room, str):
        return None
    room = raw_room.strip().lower()
    return room if room in ROOM_CATEGORIES else None


def normalize_confidence(raw_confidence: Any) -> str:
    if isinstance(raw_confidence, str) and raw_confidence.strip().lower() in _MODEL_CONFIDENCES:
        return raw_confidence.strip().lower()
    return "low"


class AIQueryClassifier:
    """Asks the language model for categories and validates what comes back."""

    def __init__(self, generator: Optional[TextGenerator] = None, timeout: Optional[float] = None):
        self.generator = generator or OpenAITextGenerator()
        self.timeout = timeout if timeout is not None else settings.AI_TIMEOUT_SECONDS

    async def classify(self, query: str) -> Union[CategoryQueryResult, ClassificationFailure]:
        """
        Classify a query with a single, time-bounded model call.

        Args:
            query: Shopper's free text

        Returns:
            CategoryQueryResult with filtered categories (possibly empty),
            or ClassificationFailure if the call or its response was unusable
        """
        prompt = build_prompt(query)

        try:
            text = await asyncio.wait_for(self.generator.generate(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"AI classification timed out after {self.timeout}s")
            return ClassificationFailure("timeout", f"No response within {self.timeout}s")
        except Exception as e:
            logger.error(f"AI provider error: {str(e)}")
            return ClassificationFailure("provider_error", str(e))

        return self.parse_response(text)

    def parse_response(self, text: str) -> Union[CategoryQueryResult, ClassificationFailure]:
        try:
            data = json.loads(strip_code_fences(text))
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Could not parse AI response as JSON: {e}")
            return ClassificationFailure("invalid_json", str(e))

        try:
            payload = AIResponsePayload.model_validate(data)
        except ValidationError as e:
            logger.warning(f"AI response missing a categories array: {e.error_count()} validation error(s)")
            return ClassificationFailure("invalid_schema", str(e))

        return CategoryQueryResult(
            categories=filter_categories(payload.categories),
            room=normalize_room(payload.room),
            confidence=normalize_confidence(payload.confidence),
            source="ai",
        )
