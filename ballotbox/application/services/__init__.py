"""Application services for the voting session."""

from ballotbox.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from ballotbox.application.services.session_script_runner import (
    SessionScriptRunner,
)
from ballotbox.application.services.session_workflow_service import (
    SessionWorkflowService,
)
from ballotbox.application.services.tally_engine_service import TallyEngineService
from ballotbox.application.services.tie_break_strategies import KeepEarliestTieBreak
from ballotbox.application.services.voter_registry_service import (
    VoterRegistryService,
)

__all__: list[str] = [
    "KeepEarliestTieBreak",
    "ProposalLedgerService",
    "SessionScriptRunner",
    "SessionWorkflowService",
    "TallyEngineService",
    "VoterRegistryService",
]
