# =============================================================================
# core/sources.py  —  Grounding citation formatting
# =============================================================================
#
# When Gemini answers with Google Search grounding, it returns the pages it
# used.  The same page often shows up several times, so we keep the first
# occurrence of each URI (in the order Gemini listed them) and render them
# as a Markdown list under the generated text.
# =============================================================================

from core.models import Citation


SOURCES_HEADING = "### Official Sources (2026):"
DEFAULT_SOURCE_TITLE = "Berlin.de"


def unique_citations(citations: list[Citation]) -> list[Citation]:
    """Drop repeated URIs, keeping first-seen order.  Entries with no URI are skipped."""
    seen: set[str] = set()
    unique = []
    for citation in citations:
        if not citation.uri or citation.uri in seen:
            continue
        seen.add(citation.uri)
        unique.append(citation)
    return unique


def append_sources(text: str, citations: list[Citation]) -> str:
    """Append a "sources" section to text, or return it unchanged if there are none."""
    unique = unique_citations(citations)
    if not unique:
        return text

    lines = [f"- [{c.title or DEFAULT_SOURCE_TITLE}]({c.uri})\n" for c in unique]
    return f"{text}\n\n{SOURCES_HEADING}\n" + "".join(lines)
