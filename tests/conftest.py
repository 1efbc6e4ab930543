"""Shared fixtures: a fake generation client standing in for Gemini."""
import pytest

from core.models import GenerationError, GenerationResponse


class FakeGenerationClient:
    """Records every request; answers with a canned response or fails."""

    def __init__(self, response=None, error=None):
        self.response = response or GenerationResponse(text="generated text")
        self.error = error
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def failing_client():
    return FakeGenerationClient(error=GenerationError("upstream unavailable"))
