"""
Affiliation Workflow Engine - guided party-affiliation enrollment.

Drives a six-step enrollment form through its view/step state machine,
validates each step against business rules before forward progress,
computes the election cycles a prospective candidate may declare, and
governs the administrative moderation lifecycle of submitted records.

Ground rules:
- Validation failures are data, never exceptions
- Collaborator failures leave session state untouched
- The current date is always injected, never read from the wall clock
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
