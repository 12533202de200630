"""Configuration module for the affiliation workflow.

Available Configurations:
- AffiliationWorkflowConfig: Age/name bounds, document requirements and
  election cycle parameters
"""

from src.config.workflow_config import (
    DEFAULT_AFFILIATION_WORKFLOW_CONFIG,
    DOCUMENTS_ONLY_AFFILIATION_WORKFLOW_CONFIG,
    AffiliationWorkflowConfig,
)

__all__ = [
    "AffiliationWorkflowConfig",
    "DEFAULT_AFFILIATION_WORKFLOW_CONFIG",
    "DOCUMENTS_ONLY_AFFILIATION_WORKFLOW_CONFIG",
]
