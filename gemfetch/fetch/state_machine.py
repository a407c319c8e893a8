"""State machine for a redirect-following fetch."""

from enum import Enum

import structlog

from gemfetch.fetch.constants import COMPONENT_FETCH


logger = structlog.get_logger()


class FetchState(str, Enum):
    """State of a redirect-following fetch.

    - FOLLOWING: Fetching the current URL, possibly after redirects
    - DONE: A non-redirect response was received
    - FAILED: The fetch aborted with an error
    """

    FOLLOWING = "FOLLOWING"
    DONE = "DONE"
    FAILED = "FAILED"


# Valid state transitions
_VALID_TRANSITIONS: dict[FetchState, set[FetchState]] = {
    FetchState.FOLLOWING: {
        FetchState.FOLLOWING,
        FetchState.DONE,
        FetchState.FAILED,
    },
    FetchState.DONE: set(),  # Terminal state
    FetchState.FAILED: set(),  # Terminal state
}


class FetchStateTransitionError(Exception):
    """Raised when an illegal state transition is attempted."""

    def __init__(self, from_state: FetchState, to_state: FetchState) -> None:
        """Initialize the transition error.

        Args:
            from_state: Current state.
            to_state: Attempted target state.
        """
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Illegal fetch state transition: {from_state.value} -> {to_state.value}"
        )


class FetchStateMachine:
    """Tracks the redirect counter and current URL of one fetch.

    Enforces valid transitions and logs all state changes.
    """

    def __init__(self, url: str) -> None:
        """Initialize the state machine.

        Args:
            url: The URL the fetch starts from.
        """
        self._state = FetchState.FOLLOWING
        self._current_url = url
        self._redirects = 0
        self._log = logger.bind(component=COMPONENT_FETCH)

    @property
    def state(self) -> FetchState:
        """Get the current state."""
        return self._state

    @property
    def current_url(self) -> str:
        """Get the URL of the next attempt."""
        return self._current_url

    @property
    def redirects(self) -> int:
        """Get the number of redirects followed so far."""
        return self._redirects

    @property
    def is_terminal(self) -> bool:
        """Check if current state is terminal."""
        return self._state in (FetchState.DONE, FetchState.FAILED)

    def can_transition_to(self, target: FetchState) -> bool:
        """Check if a transition to the target state is valid."""
        return target in _VALID_TRANSITIONS.get(self._state, set())

    def transition_to(self, target: FetchState) -> None:
        """Transition to a new state.

        Args:
            target: The target state.

        Raises:
            FetchStateTransitionError: If the transition is invalid.
        """
        if not self.can_transition_to(target):
            self._log.error(
                "illegal_state_transition",
                from_state=self._state.value,
                to_state=target.value,
            )
            raise FetchStateTransitionError(self._state, target)

        old_state = self._state
        self._state = target

        self._log.debug(
            "state_transition",
            from_state=old_state.value,
            to_state=target.value,
            redirects=self._redirects,
        )

    def follow(self, target_url: str) -> None:
        """Record a redirect and move on to its target.

        Args:
            target_url: The redirect target, taken verbatim.
        """
        self.transition_to(FetchState.FOLLOWING)
        self._redirects += 1
        self._current_url = target_url

    def to_done(self) -> None:
        """Transition to DONE state."""
        self.transition_to(FetchState.DONE)

    def to_failed(self) -> None:
        """Transition to FAILED state."""
        self.transition_to(FetchState.FAILED)
