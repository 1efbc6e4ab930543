# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration for the
# interactive relocation assistant (main.py).
#
# ARCHITECTURAL ROLE:
#   The agent/ layer only orchestrates.  It:
#     1. Receives the user's question ("How do I get a WBS?")
#     2. Works out what information is missing and asks for it
#     3. Calls the MCP tools (tools/mcp_server.py)
#     4. Presents the tool output to the user
#
#   Eligibility limits, prompts and Gemini calls live in core/ and are
#   reached only through the MCP tools.
# =============================================================================
