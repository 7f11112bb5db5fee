import asyncio

from api.models import CategoryQueryResult
from api.services.ai_query_classifier import (
    AIQueryClassifier,
    ClassificationFailure,
    OpenAITextGenerator,
    TextGenerator,
    build_prompt,
    strip_code_fences,
)
from api.utils.constants import ALLOWED_CATEGORIES


def classify(generator, query="a bed please", timeout=1.0):
    return asyncio.run(AIQueryClassifier(generator=generator, timeout=timeout).classify(query))


def test_prompt_embeds_taxonomy_and_query():
    prompt = build_prompt("grey couch for the lounge")

    for category in ALLOWED_CATEGORIES:
        assert f"- {category}" in prompt
    assert "couch -> sofa" in prompt
    assert "- bedroom: bed, wardrobe" in prompt
    assert '"categories"' in prompt
    assert "grey couch for the lounge" in prompt


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('{"a": 1}') == '{"a": 1}'


def test_valid_response(static_generator):
    generator = static_generator('{"categories": ["Bed", "wardrobe"], "room": "Bedroom", "confidence": "high"}')
    result = classify(generator)

    assert result == CategoryQueryResult(
        categories=["bed", "wardrobe"], room="bedroom", confidence="high", source="ai"
    )
    assert len(generator.prompts) == 1


def test_fenced_response_is_parsed(static_generator):
    result = classify(static_generator('```json\n{"categories": ["desk"], "room": null, "confidence": "medium"}\n```'))

    assert result.categories == ["desk"]
    assert result.room is None


def test_out_of_vocabulary_categories_are_dropped(static_generator):
    result = classify(static_generator('{"categories": ["bed", "spaceship", 7, "BED"]}'))

    assert result.categories == ["bed"]
    assert result.source == "ai"


def test_unknown_room_and_confidence_are_normalized(static_generator):
    result = classify(static_generator('{"categories": ["sofa"], "room": "garage", "confidence": 0.9}'))

    assert result.room is None
    assert result.confidence == "low"


def test_all_categories_filtered_gives_empty_success(static_generator):
    result = classify(static_generator('{"categories": ["spaceship"]}'))

    assert isinstance(result, CategoryQueryResult)
    assert result.categories == []


def test_non_json_is_a_failure(static_generator):
    result = classify(static_generator("Sure! You probably want a sofa."))

    assert isinstance(result, ClassificationFailure)
    assert result.reason == "invalid_json"


def test_missing_categories_array_is_a_failure(static_generator):
    for text in ('{"room": "office"}', '{"categories": "bed"}', '["bed"]'):
        result = classify(static_generator(text))
        assert isinstance(result, ClassificationFailure)
        assert result.reason == "invalid_schema"


def test_provider_error_is_a_failure(failing_generator):
    result = classify(failing_generator)

    assert isinstance(result, ClassificationFailure)
    assert result.reason == "provider_error"
    assert failing_generator.calls == 1


def test_missing_credential_is_a_failure():
    result = classify(OpenAITextGenerator(api_key=""))

    assert isinstance(result, ClassificationFailure)
    assert result.reason == "provider_error"
    assert "OPENAI_API_KEY" in result.detail


def test_timeout_cancels_the_call():
    class SlowGenerator(TextGenerator):
        def __init__(self):
            self.cancelled = False
            self.finished = False

        async def generate(self, prompt):
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
            self.finished = True
            return '{"categories": ["bed"]}'

    generator = SlowGenerator()
    result = classify(generator, timeout=0.01)

    assert isinstance(result, ClassificationFailure)
    assert result.reason == "timeout"
    assert generator.cancelled
    assert not generator.finished
