# =============================================================================
# main.py  —  Entry Point for the Berlin Relocation Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          chat with the assistant in the terminal
#   uv run python -m tools.mcp_server   tools only, for another MCP client
#
# The agent (agent/relocation_agent.py) launches the MCP tool server as a
# subprocess; this file only runs the conversation:
#   ask()        one user turn → the agent's final answer (tool calls echoed)
#   chat()       read/answer loop until "quit" or EOF
# =============================================================================

import asyncio
from typing import Callable

from dotenv import load_dotenv

# LiteLlm and ADK read provider keys from the environment at import time.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.relocation_agent import create_agent

APP_NAME = "berlin_relocation"
USER_ID = "local_user"
EXIT_WORDS = ("quit", "exit", "q")
NO_ANSWER = "⚠️  No response generated. The agent may have encountered an error."


async def ask(
    runner,
    session_id: str,
    text: str,
    on_tool_call: Callable[[str], None] = lambda name: print(f"  🔧 {name}"),
) -> str:
    """Send one message and return the last text part the agent produced."""
    message = types.Content(role="user", parts=[types.Part(text=text)])
    answer = ""

    async for event in runner.run_async(user_id=USER_ID, session_id=session_id, new_message=message):
        parts = event.content.parts if event.content else None
        for part in parts or []:
            if getattr(part, "function_call", None):
                on_tool_call(part.function_call.name)
            if getattr(part, "text", None):
                answer = part.text

    return answer


async def chat(runner, session_id: str, read: Callable[[str], str] = input) -> None:
    print("💬 Ask about SCHUFA letters, WBS eligibility or the Anmeldung ('quit' to exit).")

    while True:
        try:
            text = read("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            break

        if text.lower() in EXIT_WORDS:
            break
        if not text:
            continue

        answer = await ask(runner, session_id, text)
        print(f"\n🤖 Assistant:\n\n{answer}" if answer else f"\n{NO_ANSWER}")

    print("\n👋 Tschüss!")


async def run_agent():
    print("🔧 Starting the Berlin relocation assistant...")
    sessions = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=sessions)
    session = await sessions.create_session(app_name=APP_NAME, user_id=USER_ID)
    await chat(runner, session.id)


if __name__ == "__main__":
    asyncio.run(run_agent())
