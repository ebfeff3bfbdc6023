"""
ballotbox - Single-Session Voting Workflow

Governs one voting round end to end: a whitelist of eligible voters,
an ordered ledger of proposals, exactly one counted vote per voter,
and a deterministic tally that names the winning proposal.

Layers:
- domain: models, errors and event payloads (no outward imports)
- application: ports and the services that drive the session
- infrastructure: structlog observability, adapters and test stubs
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
