# =============================================================================
# core/eligibility.py  —  Berlin WBS Eligibility Calculator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Estimates whether a household qualifies for a Wohnberechtigungsschein
#   (WBS), the certificate required to rent subsidized housing in Berlin.
#
# THE TWO-TIER MODEL (2026 income brackets):
#   - WBS 140: the standard ceiling.  Base amount depends on whether the
#     household is a single person, plus a fixed amount per additional adult
#     and per child.
#   - WBS 180: the middle-income bracket, 60% above the WBS 140 ceiling.
#
#   income <= WBS 140 ceiling  →  Likely Eligible, WBS 140
#   income <= WBS 180 ceiling  →  Likely Eligible, WBS 180
#   otherwise                  →  Not Eligible
#
# This is a pure function: no I/O, no LLM, same inputs → same result.
# Inputs are already validated by the MCP layer (positive household size,
# non-negative income and child count), so there are no error cases here.
# =============================================================================

from core.models import (
    EligibilityResult,
    EligibilityStatus,
    HouseholdInput,
    Qualification,
)


# -----------------------------------------------------------------------------
# 2026 bracket constants (EUR per year, net)
# -----------------------------------------------------------------------------
SINGLE_PERSON_BASE = 16800
TWO_PERSON_BASE = 25200
PER_ADDITIONAL_ADULT = 5740
PER_CHILD = 700
MIDDLE_INCOME_FACTOR = 1.6


def compute_eligibility(
    household_size: int,
    annual_net_income: float,
    number_of_children: int = 0,
) -> EligibilityResult:
    """Classify a household against the WBS 140 / WBS 180 income ceilings.

    Args:
        household_size: Number of people in the household (>= 1).
        annual_net_income: Total annual net income in EUR (>= 0).
        number_of_children: Number of minor children (>= 0).

    Returns:
        An EligibilityResult with the status, qualification tier and both
        computed ceilings.  Both ceilings are inclusive.
    """
    if household_size == 1:
        base = SINGLE_PERSON_BASE
        extra_adults = max(0, household_size - 1)
    else:
        base = TWO_PERSON_BASE
        extra_adults = max(0, household_size - 2)

    limit_standard = (
        base
        + extra_adults * PER_ADDITIONAL_ADULT
        + number_of_children * PER_CHILD
    )
    limit_middle = limit_standard * MIDDLE_INCOME_FACTOR

    if annual_net_income <= limit_standard:
        status, qualification = EligibilityStatus.LIKELY_ELIGIBLE, Qualification.STANDARD
    elif annual_net_income <= limit_middle:
        status, qualification = EligibilityStatus.LIKELY_ELIGIBLE, Qualification.MIDDLE_INCOME
    else:
        status, qualification = EligibilityStatus.NOT_ELIGIBLE, Qualification.NONE

    return EligibilityResult(
        status=status,
        qualification=qualification,
        limit_standard=limit_standard,
        limit_middle=limit_middle,
    )


def compute_for_household(household: HouseholdInput) -> EligibilityResult:
    """Convenience wrapper taking the validated tool input directly."""
    return compute_eligibility(
        household.household_size,
        household.annual_net_income,
        household.number_of_children,
    )
