"""Tests for the MCP tool server.

Tools are called in-process through ``fastmcp.Client`` against a server
built with a fake generation client.
"""
import asyncio
import logging

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.config import Settings
from core.models import Citation, GenerationResponse
from tools.mcp_server import (
    ANALYSIS_FALLBACK,
    GUIDE_FALLBACK,
    LETTER_FALLBACK,
    create_server,
    main,
)
import tools.mcp_server as mcp_server

LETTER_ARGS = {
    "name": "Ada Example",
    "address": "Musterstraße 1, 10115 Berlin",
    "birth_date": "1990-04-01",
    "birth_place": "Dublin",
}

WBS_ARGS = {"household_size": 2, "annual_net_income": 40000, "number_of_children": 1}


def server_for(client):
    return create_server(client, Settings.from_env({}))


def call_tool(server, name, arguments=None):
    async def _call():
        async with Client(server) as client:
            return await client.call_tool(name, arguments or {})

    return asyncio.run(_call())


def text_of(result):
    assert len(result.content) == 1
    return result.content[0].text


class TestToolRegistration:

    def test_three_tools_registered(self, fake_client):
        async def _list():
            async with Client(server_for(fake_client)) as client:
                return await client.list_tools()

        names = {tool.name for tool in asyncio.run(_list())}
        assert names == {
            "generate_schufa_free_request",
            "check_wbs_eligibility_berlin",
            "get_anmeldung_guide_berlin",
        }


class TestSchufaTool:

    def test_returns_generated_letter(self, fake_client):
        fake_client.response = GenerationResponse(text="Sehr geehrte Damen und Herren, ...")

        result = call_tool(server_for(fake_client), "generate_schufa_free_request", LETTER_ARGS)

        assert text_of(result) == "Sehr geehrte Damen und Herren, ..."
        request = fake_client.requests[0]
        assert request.model == "gemini-3-flash-preview"
        assert request.use_search is False
        assert request.thinking_budget is None
        assert "Name: Ada Example" in request.prompt

    def test_missing_field_rejected_before_generation(self, fake_client):
        args = dict(LETTER_ARGS)
        del args["birth_place"]

        with pytest.raises(ToolError):
            call_tool(server_for(fake_client), "generate_schufa_free_request", args)
        assert fake_client.requests == []

    def test_failure_returns_fallback(self, failing_client):
        result = call_tool(server_for(failing_client), "generate_schufa_free_request", LETTER_ARGS)
        assert text_of(result) == LETTER_FALLBACK == "Letter generation failed."


class TestWbsTool:

    def test_uses_reasoning_model_with_computed_result(self, fake_client):
        fake_client.response = GenerationResponse(text="## WBS result")

        result = call_tool(server_for(fake_client), "check_wbs_eligibility_berlin", WBS_ARGS)

        assert text_of(result) == "## WBS result"
        request = fake_client.requests[0]
        assert request.model == "gemini-3-pro-preview"
        assert request.thinking_budget == 4000
        assert "Likely Eligible (WBS 180 (Middle-Income Bracket))" in request.prompt

    def test_settings_select_models(self, fake_client):
        settings = Settings.from_env({
            "RELOCATION_REASONING_MODEL": "custom-pro",
            "RELOCATION_THINKING_BUDGET": "512",
        })

        call_tool(create_server(fake_client, settings), "check_wbs_eligibility_berlin", WBS_ARGS)

        assert fake_client.requests[0].model == "custom-pro"
        assert fake_client.requests[0].thinking_budget == 512

    @pytest.mark.parametrize("bad_args", [
        {"household_size": 0, "annual_net_income": 1000, "number_of_children": 0},
        {"household_size": 2, "annual_net_income": -1, "number_of_children": 0},
        {"household_size": 2, "annual_net_income": 1000, "number_of_children": -1},
        {"household_size": 2, "annual_net_income": 1000},
        {"household_size": "many", "annual_net_income": 1000, "number_of_children": 0},
        {"household_size": True, "annual_net_income": 1000, "number_of_children": 0},
        {"household_size": 2, "annual_net_income": "40000", "number_of_children": 0},
        {"household_size": 2, "annual_net_income": 1000, "number_of_children": 1.5},
        {"household_size": True, "annual_net_income": "40000", "number_of_children": 0},
    ])
    def test_invalid_input_rejected_before_generation(self, fake_client, bad_args):
        with pytest.raises(ToolError):
            call_tool(server_for(fake_client), "check_wbs_eligibility_berlin", bad_args)
        assert fake_client.requests == []

    def test_failure_returns_fallback(self, failing_client):
        result = call_tool(server_for(failing_client), "check_wbs_eligibility_berlin", WBS_ARGS)
        assert text_of(result) == ANALYSIS_FALLBACK == "Analysis failed."

    def test_fractional_income_accepted(self, fake_client):
        args = {"household_size": 1, "annual_net_income": 16000.5, "number_of_children": 0}

        call_tool(server_for(fake_client), "check_wbs_eligibility_berlin", args)

        assert "Income: €16000.5," in fake_client.requests[0].prompt


class TestAnmeldungTool:

    def test_requests_grounding(self, fake_client):
        call_tool(server_for(fake_client), "get_anmeldung_guide_berlin")

        request = fake_client.requests[0]
        assert request.use_search is True
        assert request.model == "gemini-3-flash-preview"

    def test_no_citations_no_sources_section(self, fake_client):
        fake_client.response = GenerationResponse(text="Guide")

        result = call_tool(server_for(fake_client), "get_anmeldung_guide_berlin")

        assert text_of(result) == "Guide"

    def test_duplicate_citations_listed_once_in_order(self, fake_client):
        fake_client.response = GenerationResponse(text="Guide", citations=[
            Citation(uri="https://service.berlin.de/dienstleistung/120686/", title="Anmeldung"),
            Citation(uri="https://www.berlin.de/buergeraemter/"),
            Citation(uri="https://service.berlin.de/dienstleistung/120686/", title="Anmeldung"),
        ])

        text = text_of(call_tool(server_for(fake_client), "get_anmeldung_guide_berlin"))

        assert text == (
            "Guide\n\n"
            "### Official Sources (2026):\n"
            "- [Anmeldung](https://service.berlin.de/dienstleistung/120686/)\n"
            "- [Berlin.de](https://www.berlin.de/buergeraemter/)\n"
        )

    def test_failure_returns_fallback(self, failing_client):
        result = call_tool(server_for(failing_client), "get_anmeldung_guide_berlin")
        assert text_of(result) == GUIDE_FALLBACK == "Guide not available."


class TestServerMain:
    """Test the stdio entry point's startup failure handling."""

    def test_startup_error_logged_and_exits_with_status_1(self, monkeypatch, caplog, tmp_path):
        def broken_server(*args, **kwargs):
            raise RuntimeError("transport wiring failed")

        monkeypatch.setattr(mcp_server, "create_server", broken_server)
        monkeypatch.chdir(tmp_path)

        with caplog.at_level(logging.ERROR, logger="relocation-mcp"):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Fatal error" in caplog.text
        assert "transport wiring failed" in caplog.text
