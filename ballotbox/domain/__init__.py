"""
Domain layer - Pure business logic for ballotbox.

This layer contains:
- Domain models (Voter, Proposal, SessionState, WorkflowPhase)
- Domain events (session notifications)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure,
config or bootstrap. Only stdlib and typing imports are allowed.
"""

from ballotbox.domain.exceptions import BallotBoxError

__all__: list[str] = ["BallotBoxError"]
