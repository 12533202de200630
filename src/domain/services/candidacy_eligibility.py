"""Candidacy eligibility calculator.

Given an elective office and a reference date, returns the ordered list
of election years in which a candidacy declaration for that office is
legally timed.

Algorithm:
1. Classify the office as municipal or general.
2. Start from the category's base year (2024 municipal, 2026 general)
   and advance in 4-year steps until it is not earlier than the
   reference year. That is the target year.
3. Before the target year: only the target year is eligible.
4. Inside the target year: on or before the cutoff (August 15, inclusive)
   the target year is still eligible; after the cutoff the current cycle
   is closed and the next two cycles become the options.

Unset and unlisted offices yield an empty list. The reference date is
always passed in; nothing here reads the wall clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.domain.models.affiliation_record import AffiliationRecord
from src.domain.models.political_office import OfficeCategory, PoliticalOffice


@dataclass(frozen=True)
class ElectionCycleRules:
    """Election cycle parameters.

    Attributes:
        municipal_base_year: A known municipal election year.
        general_base_year: A known general election year.
        cycle_years: Years between two elections of the same category.
        cutoff_month: Month of the declaration cutoff.
        cutoff_day: Last day (inclusive) a declaration counts for the
            election held that same year.
    """

    municipal_base_year: int = 2024
    general_base_year: int = 2026
    cycle_years: int = 4
    cutoff_month: int = 8
    cutoff_day: int = 15

    def base_year_for(self, category: OfficeCategory) -> int:
        if category is OfficeCategory.MUNICIPAL:
            return self.municipal_base_year
        return self.general_base_year

    def cutoff_for(self, year: int) -> date:
        return date(year, self.cutoff_month, self.cutoff_day)


DEFAULT_ELECTION_CYCLE_RULES = ElectionCycleRules()


def classify_office(office: str | PoliticalOffice | None) -> OfficeCategory | None:
    """Classify an office label into its election cycle.

    Returns:
        MUNICIPAL or GENERAL, or None for blank/unlisted offices.
    """
    if isinstance(office, PoliticalOffice):
        return office.category
    resolved = PoliticalOffice.from_label(office)
    if resolved is None:
        return None
    return resolved.category


def next_election_year(category: OfficeCategory, reference_year: int, rules: ElectionCycleRules) -> int:
    """First election year of the category that is not before reference_year."""
    year = rules.base_year_for(category)
    while year < reference_year:
        year += rules.cycle_years
    return year


def eligible_election_years(
    office: str | PoliticalOffice | None,
    reference_date: date,
    rules: ElectionCycleRules = DEFAULT_ELECTION_CYCLE_RULES,
) -> list[str]:
    """Compute the election years a candidacy for office may be declared for.

    Args:
        office: Office label (e.g. "VEREADOR(A)") or PoliticalOffice.
        reference_date: The date the declaration is evaluated on.
        rules: Election cycle parameters.

    Returns:
        Ordered list of years as strings. Empty when the office is unset
        or unlisted; otherwise one year, or two years once the current
        cycle's cutoff has passed.
    """
    category = classify_office(office)
    if category is None:
        return []

    target = next_election_year(category, reference_date.year, rules)
    if reference_date.year < target:
        return [str(target)]

    if reference_date <= rules.cutoff_for(target):
        return [str(target)]

    return [str(target + rules.cycle_years), str(target + 2 * rules.cycle_years)]


def reconcile_election_year(record: AffiliationRecord, eligible_years: list[str]) -> str:
    """Pick the declared election year consistent with a fresh eligible set.

    A single eligible year is auto-selected. A stored year that is no
    longer eligible is cleared, never coerced to another value. Otherwise
    the stored year (possibly blank) is kept.

    Returns:
        The election year value the record should hold.
    """
    if len(eligible_years) == 1:
        return eligible_years[0]
    if record.election_year and record.election_year not in eligible_years:
        return ""
    return record.election_year
