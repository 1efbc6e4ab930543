# =============================================================================
# core/prompts.py  —  Prompt Builder
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns validated tool input into the natural-language instruction sent to
#   Gemini.  One function per tool:
#
#     build_schufa_request_prompt   → formal German GDPR letter
#     build_wbs_analysis_prompt     → Markdown explanation of a WBS result
#     build_anmeldung_guide_prompt  → fixed registration-guide request
#
#   No validation happens here; the MCP layer has already done it.
# =============================================================================

from core.models import EligibilityResult, HouseholdInput, LetterRequest


REFERENCE_YEAR = 2026

SCHUFA_ADDRESS = "SCHUFA Holding AG, Kormoranweg 5, 65201 Wiesbaden, Germany"
ANMELDUNG_BOOKING_URL = "https://service.berlin.de/dienstleistung/120686/"


def build_schufa_request_prompt(request: LetterRequest) -> str:
    """Prompt for a GDPR Article 15 "Datenkopie" request addressed to SCHUFA."""
    return (
        'Draft a formal and professional GDPR Article 15 "Datenkopie" (Data Copy) '
        "request in German to:\n"
        f"{SCHUFA_ADDRESS}.\n"
        "\n"
        "Requester Information:\n"
        f"Name: {request.name}\n"
        f"Address: {request.address}\n"
        f"Date of Birth: {request.birth_date}\n"
        f"Place of Birth: {request.birth_place}\n"
        "\n"
        f"Context: Year is {REFERENCE_YEAR}. The requester knows about the simplified "
        "online basic score but insists on the full, legally-mandated free data copy "
        "for complete transparency."
    )


def _format_euros(amount: float) -> str:
    # 40000.0 → "40000", 1234.5 → "1234.5"
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


def build_wbs_analysis_prompt(household: HouseholdInput, result: EligibilityResult) -> str:
    """Prompt asking the reasoning model to explain a computed WBS result.

    The verdict itself comes from core/eligibility.py; the model only
    explains it and suggests next steps.
    """
    return (
        f"Analyze Berlin WBS housing eligibility for a household in {REFERENCE_YEAR}.\n"
        f"Inputs: Household Size: {household.household_size}, "
        f"Income: €{_format_euros(household.annual_net_income)}, "
        f"Result: {result.status.value} ({result.qualification.value}).\n"
        "Explain results in Markdown. Mention next steps for the Wohnungsamt."
    )


def build_anmeldung_guide_prompt() -> str:
    return (
        f"Guide for 'Anmeldung' in Berlin for {REFERENCE_YEAR}. Include digital options "
        f"(BundID/eID), the booking link {ANMELDUNG_BOOKING_URL}, and tips for "
        "finding appointments. Use live web search to ground the guide in current "
        "official sources."
    )
