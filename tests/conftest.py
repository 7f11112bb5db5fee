import pytest

from api.services.ai_query_classifier import TextGenerator, AIProviderError


class StaticGenerator(TextGenerator):
    """Returns a canned response and records every prompt it receives."""

    def __init__(self, text):
        self.text = text
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        return self.text


class FailingGenerator(TextGenerator):
    def __init__(self):
        self.calls = 0

    async def generate(self, prompt):
        self.calls += 1
        raise AIProviderError("503 Service Unavailable")


@pytest.fixture
def static_generator():
    return StaticGenerator


@pytest.fixture
def failing_generator():
    return FailingGenerator()
