"""Application DTOs (Data Transfer Objects).

These DTOs are used for data transfer across layer boundaries. They are
distinct from domain models (immutable business objects): a DTO owns a
wire format, the domain model owns the business attributes.
"""

from src.application.dtos.affiliation_record import AffiliationRecordDTO

__all__ = [
    "AffiliationRecordDTO",
]
