# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP clients and core/.  The
#   server module:
#     1. Declares each tool's input schema (validated by FastMCP/pydantic)
#     2. Calls core/ for the calculation, the prompt and the Gemini call
#     3. Returns plain text, which FastMCP wraps as one text content item
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain eligibility rules or prompt text (that's core/)
#   - They do NOT talk to the Gemini SDK directly (core/generation.py does)
#   - They do NOT know about Google ADK
# =============================================================================
