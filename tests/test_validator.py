"""
Tests for the press sequence state machine.

Scenarios use the solution TL, BR, TR, BL.
"""

import pytest

from corners.core.definitions import Corner
from corners.simulation.validator import (
    DuplicateStrike,
    Ignored,
    InputValidator,
    MismatchStrike,
    Progress,
    SessionState,
    Success,
    handle_press,
    is_strike,
)

TL, TR, BR, BL = Corner.TL, Corner.TR, Corner.BR, Corner.BL
SOLUTION = (TL, BR, TR, BL)


@pytest.fixture
def validator():
    return InputValidator(SOLUTION)


def press_all(validator, corners):
    return [validator.press(c) for c in corners]


class TestScenarios:

    def test_correct_sequence(self, validator):
        outcomes = press_all(validator, [TL, BR, TR, BL])
        assert outcomes == [Progress(TL), Progress(BR), Progress(TR), Success()]
        assert validator.solved

    def test_success_only_on_fourth_press(self, validator):
        for corner in SOLUTION[:3]:
            assert not isinstance(validator.press(corner), Success)
            assert not validator.solved
        assert isinstance(validator.press(SOLUTION[3]), Success)

    def test_immediate_duplicate(self, validator):
        outcomes = press_all(validator, [TL, TL])
        assert outcomes == [Progress(TL), DuplicateStrike(entered_before=(TL,), corner=TL)]
        assert validator.progress == 0

    def test_duplicate_on_fourth_press_beats_mismatch(self, validator):
        outcomes = press_all(validator, [TL, BR, TR, TL])
        assert outcomes[-1] == DuplicateStrike(entered_before=(TL, BR, TR), corner=TL)
        assert not isinstance(outcomes[-1], MismatchStrike)

    def test_duplicate_even_on_matching_prefix(self, validator):
        press_all(validator, [TL, BR])
        outcome = validator.press(BR)
        assert isinstance(outcome, DuplicateStrike)

    def test_mismatch_on_fourth_press(self, validator):
        outcomes = press_all(validator, [TL, TR, BR, BL])
        assert outcomes[:3] == [Progress(TL), Progress(TR), Progress(BR)]
        assert outcomes[3] == MismatchStrike(entered=(TL, TR, BR, BL))
        assert validator.progress == 0
        assert not validator.solved

    def test_wrong_prefix_not_reported_early(self, validator):
        """A wrong first press is only judged once four corners are in."""
        assert validator.press(BL) == Progress(BL)

    def test_retry_after_strike(self, validator):
        press_all(validator, [TL, TL])
        outcomes = press_all(validator, SOLUTION)
        assert outcomes[-1] == Success()
        assert validator.strikes == 1

    def test_presses_after_solve_ignored(self, validator):
        press_all(validator, SOLUTION)
        assert validator.press(TL) == Ignored(TL)
        assert validator.solved
        assert validator.strikes == 0


class TestHandlePress:

    def test_pure_transition(self):
        state = SessionState(entered=(TL,))
        new_state, outcome = handle_press(state, SOLUTION, BR)
        assert state == SessionState(entered=(TL,))
        assert new_state == SessionState(entered=(TL, BR))
        assert outcome == Progress(BR)

    def test_strike_resets_state(self):
        new_state, outcome = handle_press(SessionState(entered=(TL, BR, TR)), SOLUTION, TR)
        assert new_state == SessionState()
        assert is_strike(outcome)

    def test_solved_state_frozen(self):
        solved = SessionState(entered=SOLUTION, solved=True)
        new_state, outcome = handle_press(solved, SOLUTION, BL)
        assert new_state is solved
        assert isinstance(outcome, Ignored)

    def test_success_state(self):
        new_state, outcome = handle_press(SessionState(entered=SOLUTION[:3]), SOLUTION, BL)
        assert new_state.solved
        assert new_state.progress == 4
        assert outcome == Success()

    @pytest.mark.parametrize("corner", [-1, 4, 10])
    def test_invalid_corner(self, corner):
        with pytest.raises(ValueError):
            handle_press(SessionState(), SOLUTION, corner)

    def test_is_strike(self):
        assert is_strike(MismatchStrike(entered=SOLUTION))
        assert is_strike(DuplicateStrike(entered_before=(), corner=TL))
        assert not is_strike(Progress(TL))
        assert not is_strike(Success())


class TestOutcomeMessages:

    def test_duplicate_message(self):
        outcome = DuplicateStrike(entered_before=(TL, BR), corner=TL)
        assert outcome.describe() == "You pressed TL a second time after TL, BR. Strike."

    def test_mismatch_message(self):
        outcome = MismatchStrike(entered=(TL, TR, BR, BL))
        assert outcome.describe() == "You entered: TL, TR, BR, BL. Strike."


class TestValidatorConstruction:

    @pytest.mark.parametrize("solution", [(0, 1, 2), (0, 1, 2, 2), (0, 1, 2, 4)])
    def test_invalid_solution(self, solution):
        with pytest.raises(ValueError):
            InputValidator(solution)

    def test_reset_drops_attempt(self, validator):
        press_all(validator, [TL, BR])
        validator.reset()
        assert validator.progress == 0

    def test_reset_keeps_solved(self, validator):
        press_all(validator, SOLUTION)
        validator.reset()
        assert validator.solved
