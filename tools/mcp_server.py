# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the three MCP tools of the Berlin relocation assistant.  Each
#   tool is a thin wrapper around core/: it validates input, builds a prompt,
#   asks Gemini for text and returns that text.
#
# HOW IT WORKS (the flow):
#   1. The MCP client (an IDE, a desktop assistant, or agent/ in this repo)
#      calls a tool by name, e.g. "check_wbs_eligibility_berlin"
#   2. FastMCP validates the arguments against the signature below
#      (pydantic Field constraints, strict: no "40000" for a number, no
#      true for a count).  Invalid calls never reach Gemini.
#   3. The tool runs core/ logic: calculator (WBS only) → prompt → Gemini
#   4. The text comes back as a single text content item
#
# THE TOOLS:
#   generate_schufa_free_request  → German GDPR Art. 15 letter (flash model)
#   check_wbs_eligibility_berlin  → WBS 140/180 estimate + explanation (pro model)
#   get_anmeldung_guide_berlin    → registration guide with web sources (flash + search)
#
# DEPENDENCY INJECTION:
#   create_server() receives the generation client instead of reaching for
#   a module-level global, so tests can hand it a fake client.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server      (stdio transport)
# =============================================================================

import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core.config import Settings
from core.eligibility import compute_for_household
from core.generation import (
    GeminiClient,
    GenerationClient,
    fast_request,
    generate_or_fallback,
    reasoning_request,
)
from core.models import HouseholdInput, LetterRequest
from core.prompts import (
    build_anmeldung_guide_prompt,
    build_schufa_request_prompt,
    build_wbs_analysis_prompt,
)
from core.sources import append_sources

SERVER_NAME = "berlin-relocation-assistant"

LETTER_FALLBACK = "Letter generation failed."
ANALYSIS_FALLBACK = "Analysis failed."
GUIDE_FALLBACK = "Guide not available."

logger = logging.getLogger("relocation-mcp")

# =============================================================================
# Logging helpers
# =============================================================================
# Logs go to STDERR: STDOUT is the MCP transport, and anything else written
# there would corrupt the JSON-RPC stream.
#
#   CYAN    incoming tool call + parameters
#   YELLOW  intermediate status
#   GREEN   response summary
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log a one-line summary of the reply in GREEN, then return it."""
    first_line = text.strip().splitlines()[0] if text.strip() else ""
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars, {first_line[:60]!r}{_RESET}")
    return text


# =============================================================================
# Server factory
# =============================================================================
def create_server(client: GenerationClient, settings: Optional[Settings] = None) -> FastMCP:
    """Build the FastMCP server with all three tools bound to ``client``."""
    settings = settings or Settings()
    mcp = FastMCP(SERVER_NAME)

    # =========================================================================
    # TOOL 1: generate_schufa_free_request
    # =========================================================================
    @mcp.tool()
    async def generate_schufa_free_request(
        name: Annotated[str, Field(description="Legal name of the requester")],
        address: Annotated[str, Field(description="Current address in Germany")],
        birth_date: Annotated[str, Field(description="Date of birth (YYYY-MM-DD)")],
        birth_place: Annotated[str, Field(description="Place of birth")],
    ) -> str:
        """Draft a formal German letter requesting the free GDPR Art. 15 data copy from SCHUFA.

        WHEN TO CALL THIS: The user needs their SCHUFA credit record (landlords
        in Berlin usually ask for it) and wants the full free copy rather than
        the paid or simplified score.

        Returns the letter text, ready to print and sign.
        """
        _log_request("generate_schufa_free_request",
                     name=name, address=address,
                     birth_date=birth_date, birth_place=birth_place)

        letter = LetterRequest(
            name=name, address=address, birth_date=birth_date, birth_place=birth_place,
        )
        request = fast_request(settings, build_schufa_request_prompt(letter))
        response = await generate_or_fallback(client, request, LETTER_FALLBACK)

        return _log_response("generate_schufa_free_request", response.text)

    # =========================================================================
    # TOOL 2: check_wbs_eligibility_berlin
    # =========================================================================
    # The eligibility verdict is computed locally (core/eligibility.py) and
    # handed to the model as a fact; the model only explains it.
    # =========================================================================
    @mcp.tool()
    async def check_wbs_eligibility_berlin(
        household_size: Annotated[int, Field(strict=True, gt=0, description="Number of people in the household")],
        annual_net_income: Annotated[float, Field(strict=True, ge=0, description="Total annual net income (EUR)")],
        number_of_children: Annotated[int, Field(strict=True, ge=0, description="Number of minor children")],
    ) -> str:
        """Estimate eligibility for a Berlin WBS (subsidized housing certificate).

        Uses the 2026 WBS 140 (standard) and WBS 180 (middle-income) income
        ceilings, then returns a Markdown explanation of the result with next
        steps for the Wohnungsamt.
        """
        _log_request("check_wbs_eligibility_berlin",
                     household_size=household_size,
                     annual_net_income=annual_net_income,
                     number_of_children=number_of_children)

        household = HouseholdInput(
            household_size=household_size,
            annual_net_income=annual_net_income,
            number_of_children=number_of_children,
        )
        result = compute_for_household(household)
        _log_status(f"{result.status.value} ({result.qualification.value}), "
                    f"limits: {result.limit_standard} / {result.limit_middle}")

        request = reasoning_request(settings, build_wbs_analysis_prompt(household, result))
        response = await generate_or_fallback(client, request, ANALYSIS_FALLBACK)

        return _log_response("check_wbs_eligibility_berlin", response.text)

    # =========================================================================
    # TOOL 3: get_anmeldung_guide_berlin
    # =========================================================================
    @mcp.tool()
    async def get_anmeldung_guide_berlin() -> str:
        """Step-by-step guide to registering an address (Anmeldung) in Berlin.

        Covers digital options (BundID/eID), the official booking link and tips
        for finding appointments.  Grounded in a live web search; the official
        sources used are listed at the end.
        """
        _log_request("get_anmeldung_guide_berlin")

        request = fast_request(settings, build_anmeldung_guide_prompt(), use_search=True)
        response = await generate_or_fallback(client, request, GUIDE_FALLBACK)
        _log_status(f"{len(response.citations)} grounding sources")

        text = append_sources(response.text, response.citations)
        return _log_response("get_anmeldung_guide_berlin", text)

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Start the server on stdio.  Startup failures exit with status 1."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if settings.api_key:
        logger.info("Gemini API key configured")
    else:
        logger.warning("No Gemini API key set (GEMINI_API_KEY / GOOGLE_API_KEY / API_KEY); "
                       "every tool will return its fallback text")

    try:
        server = create_server(GeminiClient(api_key=settings.api_key), settings)
        logger.info(f"{SERVER_NAME} MCP server running on stdio")
        server.run()
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
