"""Elective offices a member may declare a candidacy for.

Offices are contested on two independent four-year cycles: municipal
offices (mayor, vice-mayor, city council) and general offices (every
other listed office).
"""

from __future__ import annotations

from enum import Enum


class OfficeCategory(Enum):
    """Election cycle an office belongs to."""

    MUNICIPAL = "municipal"
    GENERAL = "general"


class PoliticalOffice(str, Enum):
    """Listed elective offices, valued by their form labels."""

    MAYOR = "PREFEITO(A)"
    VICE_MAYOR = "VICE-PREFEITO(A)"
    CITY_COUNCILOR = "VEREADOR(A)"
    STATE_DEPUTY = "DEPUTADO(A) ESTADUAL"
    DISTRICT_DEPUTY = "DEPUTADO(A) DISTRITAL"
    FEDERAL_DEPUTY = "DEPUTADO(A) FEDERAL"
    SENATOR = "SENADOR(A)"
    ALTERNATE_SENATOR = "SUPLENTE DE SENADOR(A)"
    GOVERNOR = "GOVERNADOR(A)"
    VICE_GOVERNOR = "VICE-GOVERNADOR(A)"
    PRESIDENT = "PRESIDENTE"

    @property
    def category(self) -> OfficeCategory:
        if self in MUNICIPAL_OFFICES:
            return OfficeCategory.MUNICIPAL
        return OfficeCategory.GENERAL

    @classmethod
    def from_label(cls, label: str | None) -> PoliticalOffice | None:
        """Resolve a form label to an office.

        Returns:
            The matching office, or None for blank or unlisted labels.
        """
        if not label:
            return None
        try:
            return cls(label.strip())
        except ValueError:
            return None


MUNICIPAL_OFFICES: frozenset[PoliticalOffice] = frozenset(
    {
        PoliticalOffice.MAYOR,
        PoliticalOffice.VICE_MAYOR,
        PoliticalOffice.CITY_COUNCILOR,
    }
)
