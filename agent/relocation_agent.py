# =============================================================================
# agent/relocation_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the interactive relocation assistant used by main.py.  The agent
#   has no relocation logic of its own: it has
#     - a system prompt (agent/prompt.py)
#     - the three MCP tools (tools/mcp_server.py, launched as a subprocess)
#     - a model to reason with
#
# MCP CONNECTION:
#   ADK starts the MCP server as a subprocess ("python -m tools.mcp_server")
#   and talks to it over stdin/stdout.  The tools are discovered
#   automatically.  The subprocess inherits the environment, so the same
#   GEMINI_API_KEY serves both the agent and the tools.
#
# MODEL CHOICE:
#   RELOCATION_AGENT_MODEL selects the model.  Gemini model names are passed
#   to ADK as-is (native support).  Anything else, e.g.
#   "openrouter/openai/gpt-4o", is routed through ADK's LiteLlm adapter.
# =============================================================================

import os
import sys
from typing import Optional, Union

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_relocation_assistant_prompt
from core.config import Settings

AGENT_NAME = "berlin_relocation_assistant"


def resolve_agent_model(model_name: str) -> Union[str, LiteLlm]:
    """Return a model ADK can use: Gemini names directly, others via LiteLlm."""
    if model_name.startswith("gemini"):
        return model_name
    return LiteLlm(model=model_name)


def create_mcp_toolset() -> MCPToolset:
    """Connect to tools/mcp_server.py over stdio, run from the project root."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    return MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,            # Same interpreter / venv as the agent
            args=["-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create and configure the Berlin relocation assistant agent.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or Settings.from_env()

    return Agent(
        name=AGENT_NAME,
        model=resolve_agent_model(settings.agent_model),
        instruction=get_relocation_assistant_prompt(),
        tools=[create_mcp_toolset()],
    )
