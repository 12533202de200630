"""
Domain layer - Pure business logic for the affiliation workflow.

This layer contains:
- Domain models (affiliation record, workflow views, moderation status)
- Domain services (field validators, candidacy eligibility, step validation)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import AffiliationError

__all__: list[str] = ["AffiliationError"]
