"""Unit tests for the fetch state machine."""

import pytest

from gemfetch.fetch.state_machine import (
    FetchState,
    FetchStateMachine,
    FetchStateTransitionError,
)


class TestFetchStateMachine:
    """Tests for FetchStateMachine transitions."""

    def test_initial_state(self) -> None:
        """A new fetch starts following with no redirects."""
        machine = FetchStateMachine("gemini://example.org/")

        assert machine.state == FetchState.FOLLOWING
        assert machine.current_url == "gemini://example.org/"
        assert machine.redirects == 0
        assert machine.is_terminal is False

    def test_follow_updates_url_and_counter(self) -> None:
        """Following a redirect bumps the counter and swaps the URL."""
        machine = FetchStateMachine("start")

        machine.follow("next")
        machine.follow("last")

        assert machine.state == FetchState.FOLLOWING
        assert machine.current_url == "last"
        assert machine.redirects == 2

    def test_done_is_terminal(self) -> None:
        """DONE accepts no further transitions."""
        machine = FetchStateMachine("start")
        machine.to_done()

        assert machine.is_terminal is True
        with pytest.raises(FetchStateTransitionError) as exc_info:
            machine.follow("next")

        assert exc_info.value.from_state == FetchState.DONE
        assert exc_info.value.to_state == FetchState.FOLLOWING
        assert machine.redirects == 0

    def test_failed_is_terminal(self) -> None:
        """FAILED accepts no further transitions."""
        machine = FetchStateMachine("start")
        machine.to_failed()

        assert machine.is_terminal is True
        with pytest.raises(FetchStateTransitionError):
            machine.to_done()

    @pytest.mark.parametrize(
        "target", [FetchState.FOLLOWING, FetchState.DONE, FetchState.FAILED]
    )
    def test_valid_transitions_from_following(self, target: FetchState) -> None:
        """Every state is reachable from FOLLOWING."""
        assert FetchStateMachine("start").can_transition_to(target) is True

    def test_error_message(self) -> None:
        """Transition errors name both states."""
        error = FetchStateTransitionError(FetchState.DONE, FetchState.FAILED)

        assert str(error) == "Illegal fetch state transition: DONE -> FAILED"
