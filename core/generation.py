# =============================================================================
# core/generation.py  —  Gemini Generation Client Adapter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   The one place that talks to the Gemini API (google-genai SDK).
#
#   GeminiClient.generate()   → GenerationResponse, or raises GenerationError
#   generate_or_fallback()    → always returns a GenerationResponse; on a
#                               GenerationError it substitutes the tool's
#                               fallback text
#
#   Every tool answers with text, even when Gemini is unreachable, the key is
#   missing or the response is empty.  That mapping lives in
#   generate_or_fallback() so it can be tested without the network.
#
# MODEL SELECTION:
#   fast_request()       → flash model (letter, Anmeldung guide)
#   reasoning_request()  → pro model + thinking budget (WBS analysis)
#
# One outbound call per tool invocation.  No retries, no caching.
# =============================================================================

import logging
from typing import Any, Optional, Protocol

from google import genai
from google.genai import errors, types

from core.config import Settings
from core.models import (
    Citation,
    GenerationError,
    GenerationRequest,
    GenerationResponse,
)

logger = logging.getLogger(__name__)

_AUTH_ERROR_CODES = {401, 403}


class GenerationClient(Protocol):
    """Anything that can turn a GenerationRequest into a GenerationResponse.

    Implementations raise GenerationError on failure.  Tests substitute a
    fake that records requests.
    """

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        ...


# =============================================================================
# Request builders
# =============================================================================
def fast_request(settings: Settings, prompt: str, use_search: bool = False) -> GenerationRequest:
    return GenerationRequest(model=settings.fast_model, prompt=prompt, use_search=use_search)


def reasoning_request(settings: Settings, prompt: str) -> GenerationRequest:
    return GenerationRequest(
        model=settings.reasoning_model,
        prompt=prompt,
        thinking_budget=settings.thinking_budget,
    )


# =============================================================================
# GeminiClient
# =============================================================================
class GeminiClient:
    """Async adapter over ``google.genai.Client``.

    The SDK client is created on first use, so a missing API key only makes
    calls fail instead of crashing server startup.  Pass ``client`` to inject
    a pre-built (or fake) SDK client.
    """

    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        self._api_key = api_key
        self._client = client

    def _sdk_client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                logger.warning("Gemini call skipped: no API key configured")
                raise GenerationError("No Gemini API key configured")
            try:
                self._client = genai.Client(api_key=self._api_key)
            except Exception as e:
                logger.error(f"Could not create the Gemini client: {e}")
                raise GenerationError(f"Gemini client unavailable: {e}") from e
        return self._client

    @staticmethod
    def build_config(request: GenerationRequest) -> Optional[types.GenerateContentConfig]:
        """Translate request flags into a GenerateContentConfig (None if no flags)."""
        if not request.use_search and request.thinking_budget is None:
            return None

        options: dict[str, Any] = {}
        if request.use_search:
            options["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        if request.thinking_budget is not None:
            options["thinking_config"] = types.ThinkingConfig(
                thinking_budget=request.thinking_budget
            )
        return types.GenerateContentConfig(**options)

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        client = self._sdk_client()

        try:
            response = await client.aio.models.generate_content(
                model=request.model,
                contents=request.prompt,
                config=self.build_config(request),
            )
        except errors.APIError as e:
            if e.code in _AUTH_ERROR_CODES:
                logger.error(f"Gemini rejected the API key ({e.code}) for {request.model}")
            else:
                logger.error(f"Gemini API error ({e.code}) for {request.model}: {e}")
            raise GenerationError(str(e)) from e
        except Exception as e:
            logger.error(f"Gemini call to {request.model} failed: {e}")
            raise GenerationError(str(e)) from e

        try:
            text = response.text
            citations = extract_citations(response)
        except (AttributeError, IndexError, TypeError, ValueError) as e:
            raise GenerationError(f"Malformed response from {request.model}: {e}") from e

        if not text:
            raise GenerationError(f"Empty response from {request.model}")

        return GenerationResponse(text=text, citations=citations)


def extract_citations(response: Any) -> list[Citation]:
    """Pull web grounding sources out of the first candidate, in order."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None or not getattr(web, "uri", None):
            continue
        citations.append(Citation(uri=web.uri, title=getattr(web, "title", None)))
    return citations


# =============================================================================
# Fallback boundary
# =============================================================================
async def generate_or_fallback(
    client: GenerationClient,
    request: GenerationRequest,
    fallback: str,
) -> GenerationResponse:
    """Run ``request``; on GenerationError return ``fallback`` with no citations."""
    try:
        return await client.generate(request)
    except GenerationError as e:
        logger.warning(f"Using fallback text for {request.model}: {e}")
        return GenerationResponse(text=fallback)
