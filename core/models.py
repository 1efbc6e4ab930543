# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through a single tool call.  Nothing here outlives the call that created it.
#
#   Tool input            →  LetterRequest / HouseholdInput  (guide: no input)
#   Calculator output     →  EligibilityResult
#   What we send Gemini   →  GenerationRequest
#   What Gemini sends back →  GenerationResponse (+ Citation list)
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# -----------------------------------------------------------------------------
# Tool inputs — one variant per tool
# -----------------------------------------------------------------------------
# The MCP layer validates raw arguments (tools/mcp_server.py) and then builds
# one of these.  The guide tool takes no input, so it has no variant.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LetterRequest:
    """Personal details printed on the SCHUFA data-copy request letter."""

    name: str                          # Legal name of the requester
    address: str                       # Current address in Germany
    birth_date: str                    # "YYYY-MM-DD"
    birth_place: str


@dataclass(frozen=True)
class HouseholdInput:
    """Household figures for the WBS eligibility estimate."""

    household_size: int                # People in the household, >= 1
    annual_net_income: float           # EUR per year, >= 0
    number_of_children: int = 0        # Minor children, >= 0


# -----------------------------------------------------------------------------
# EligibilityResult — the calculator's verdict
# -----------------------------------------------------------------------------
class EligibilityStatus(str, Enum):
    NOT_ELIGIBLE = "Not Eligible"
    LIKELY_ELIGIBLE = "Likely Eligible"


class Qualification(str, Enum):
    NONE = "None"
    STANDARD = "WBS 140 (Standard Subsidized Housing)"
    MIDDLE_INCOME = "WBS 180 (Middle-Income Bracket)"


@dataclass(frozen=True)
class EligibilityResult:
    """Outcome of the two-tier WBS income check.

    limit_standard is the WBS 140 ceiling, limit_middle the WBS 180 ceiling
    (always limit_standard * 1.6).
    """

    status: EligibilityStatus
    qualification: Qualification
    limit_standard: int
    limit_middle: float


# -----------------------------------------------------------------------------
# Generation request / response
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GenerationRequest:
    """A single call to the text-generation service."""

    model: str                         # e.g. "gemini-3-flash-preview"
    prompt: str
    use_search: bool = False           # Enable Google Search grounding
    thinking_budget: Optional[int] = None  # Reasoning-token hint, pro model only


@dataclass(frozen=True)
class Citation:
    """One grounding source returned alongside generated text."""

    uri: str
    title: Optional[str] = None


@dataclass
class GenerationResponse:
    """Generated text plus any grounding sources (usually none)."""

    text: str
    citations: list[Citation] = field(default_factory=list)


class GenerationError(Exception):
    """Raised by a generation client when it cannot produce text."""
