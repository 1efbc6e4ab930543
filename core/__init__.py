# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains the business logic of the Berlin relocation assistant.
#
#   models.py       data shapes for one tool call
#   eligibility.py  WBS 140 / WBS 180 income check (pure)
#   prompts.py      prompt templates (pure)
#   sources.py      grounding citation list (pure)
#   config.py       environment settings
#   generation.py   the only module that talks to the Gemini API
#
# Nothing in this package imports FastMCP or Google ADK.
# =============================================================================
