"""
Infrastructure layer - External adapters for the affiliation workflow.

This layer contains:
- Observability (structlog configuration, correlation IDs)
- Adapters (system clock)
- Stubs (in-memory collaborators for development and testing)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
