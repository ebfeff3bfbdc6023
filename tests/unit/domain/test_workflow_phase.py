"""Unit tests for the workflow phase state machine model."""

import pytest

from ballotbox.domain.models.session_phase import (
    FORWARD_TRANSITIONS,
    PHASE_ORDER,
    PHASE_TRANSITION_MATRIX,
    RestartMode,
    WorkflowPhase,
)


class TestPhaseOrder:
    """Tests for the linear order of a session."""

    def test_order_starts_with_registering_voters(self) -> None:
        """A session starts by registering voters."""
        assert PHASE_ORDER[0] is WorkflowPhase.REGISTERING_VOTERS

    def test_order_ends_with_tallied(self) -> None:
        """A session ends tallied."""
        assert PHASE_ORDER[-1] is WorkflowPhase.TALLIED

    def test_order_covers_every_phase_once(self) -> None:
        """Every phase appears exactly once in the order."""
        assert sorted(PHASE_ORDER, key=lambda p: p.value) == sorted(
            WorkflowPhase, key=lambda p: p.value
        )

    def test_forward_transitions_follow_order(self) -> None:
        """Each phase's successor is the next phase in the order."""
        for current, successor in zip(PHASE_ORDER, PHASE_ORDER[1:]):
            assert FORWARD_TRANSITIONS[current] is successor


class TestNextPhase:
    """Tests for WorkflowPhase.next_phase."""

    @pytest.mark.parametrize(
        ("phase", "expected"),
        [
            (WorkflowPhase.REGISTERING_VOTERS, WorkflowPhase.PROPOSALS_REGISTRATION_OPEN),
            (
                WorkflowPhase.PROPOSALS_REGISTRATION_OPEN,
                WorkflowPhase.PROPOSALS_REGISTRATION_CLOSED,
            ),
            (WorkflowPhase.PROPOSALS_REGISTRATION_CLOSED, WorkflowPhase.VOTING_OPEN),
            (WorkflowPhase.VOTING_OPEN, WorkflowPhase.VOTING_CLOSED),
            (WorkflowPhase.VOTING_CLOSED, WorkflowPhase.TALLIED),
        ],
    )
    def test_next_phase(self, phase: WorkflowPhase, expected: WorkflowPhase) -> None:
        """Every non-terminal phase has exactly one forward successor."""
        assert phase.next_phase() is expected

    def test_tallied_has_no_successor(self) -> None:
        """Leaving TALLIED is a restart, not a forward step."""
        assert WorkflowPhase.TALLIED.next_phase() is None


class TestTransitionMatrix:
    """Tests for the allowed single-step transitions."""

    def test_only_tallied_is_terminal(self) -> None:
        """TALLIED is the single terminal phase."""
        terminal = [phase for phase in WorkflowPhase if phase.is_terminal()]
        assert terminal == [WorkflowPhase.TALLIED]

    def test_restart_is_only_backward_edge(self) -> None:
        """TALLIED may only move back to REGISTERING_VOTERS."""
        assert WorkflowPhase.TALLIED.valid_transitions() == frozenset(
            {WorkflowPhase.REGISTERING_VOTERS}
        )

    def test_no_phase_can_be_skipped(self) -> None:
        """Every phase reaches exactly one other phase."""
        for phase in WorkflowPhase:
            assert len(PHASE_TRANSITION_MATRIX[phase]) == 1

    def test_no_self_transitions(self) -> None:
        """A phase never transitions to itself."""
        for phase in WorkflowPhase:
            assert phase not in phase.valid_transitions()


class TestRestartMode:
    """Tests for restart modes."""

    def test_values(self) -> None:
        """Restart modes serialize to their names."""
        assert RestartMode("REMOVE_VOTERS") is RestartMode.REMOVE_VOTERS
        assert RestartMode("RESET_VOTERS") is RestartMode.RESET_VOTERS
