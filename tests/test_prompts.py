"""Tests for the prompt templates."""
from core.eligibility import compute_eligibility
from core.models import HouseholdInput, LetterRequest
from core.prompts import (
    ANMELDUNG_BOOKING_URL,
    build_anmeldung_guide_prompt,
    build_schufa_request_prompt,
    build_wbs_analysis_prompt,
)


class TestSchufaPrompt:

    def test_embeds_requester_details(self):
        letter = LetterRequest(
            name="Ada Example",
            address="Musterstraße 1, 10115 Berlin",
            birth_date="1990-04-01",
            birth_place="Dublin",
        )
        prompt = build_schufa_request_prompt(letter)

        assert "Name: Ada Example" in prompt
        assert "Address: Musterstraße 1, 10115 Berlin" in prompt
        assert "Date of Birth: 1990-04-01" in prompt
        assert "Place of Birth: Dublin" in prompt

    def test_addresses_schufa_in_german(self):
        prompt = build_schufa_request_prompt(LetterRequest("A", "B", "C", "D"))

        assert "SCHUFA Holding AG, Kormoranweg 5, 65201 Wiesbaden" in prompt
        assert "GDPR Article 15" in prompt
        assert "in German" in prompt
        assert "2026" in prompt


class TestWbsPrompt:

    def test_embeds_inputs_and_result(self):
        household = HouseholdInput(household_size=2, annual_net_income=40000.0, number_of_children=1)
        result = compute_eligibility(2, 40000.0, 1)
        prompt = build_wbs_analysis_prompt(household, result)

        assert "Household Size: 2" in prompt
        assert "Income: €40000," in prompt
        assert "Result: Likely Eligible (WBS 180 (Middle-Income Bracket))" in prompt
        assert "Wohnungsamt" in prompt
        assert "Markdown" in prompt

    def test_keeps_fractional_income(self):
        household = HouseholdInput(household_size=1, annual_net_income=1234.5, number_of_children=0)
        prompt = build_wbs_analysis_prompt(household, compute_eligibility(1, 1234.5, 0))
        assert "Income: €1234.5," in prompt

    def test_not_eligible_result(self):
        household = HouseholdInput(household_size=3, annual_net_income=100000, number_of_children=0)
        prompt = build_wbs_analysis_prompt(household, compute_eligibility(3, 100000, 0))
        assert "Result: Not Eligible (None)" in prompt


class TestAnmeldungPrompt:

    def test_fixed_text(self):
        prompt = build_anmeldung_guide_prompt()

        assert ANMELDUNG_BOOKING_URL in prompt
        assert "BundID/eID" in prompt
        assert "web search" in prompt
        assert prompt == build_anmeldung_guide_prompt()
