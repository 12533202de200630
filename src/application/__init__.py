"""
Application layer - Use cases and orchestration for the affiliation workflow.

This layer contains:
- Port definitions (abstract interfaces for external collaborators)
- DTOs for the collaborators' wire payloads
- Application services (workflow and moderation state machines)

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: infrastructure, bootstrap
"""
