"""Connection state machine for the graph client lifecycle."""

import logging
from enum import Enum, auto
from typing import Callable

logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """
    Connection lifecycle states.

    State transitions:
        DISCONNECTED -> CONNECTING -> CONNECTED | FAILED
        CONNECTED -> CONNECTING  (reconnect)
        FAILED -> CONNECTING     (retry)

    FAILED ends a single attempt only; connect() may be called again
    and re-enters CONNECTING.
    """

    DISCONNECTED = auto()
    CONNECTING = auto()
    CONNECTED = auto()
    FAILED = auto()

    def __str__(self) -> str:
        return self.name


class InvalidStateTransition(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: ConnectionState, to_state: ConnectionState):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid state transition: {from_state.name} -> {to_state.name}"
        )


# Type for state transition callbacks
StateTransitionCallback = Callable[[ConnectionState, ConnectionState], None]


class ConnectionStateMachine:
    """
    Tracks the connection lifecycle of one client.

    Enforces valid state transitions and notifies listeners
    when transitions occur.
    """

    VALID_TRANSITIONS: dict[ConnectionState, list[ConnectionState]] = {
        ConnectionState.DISCONNECTED: [ConnectionState.CONNECTING],
        ConnectionState.CONNECTING: [
            ConnectionState.CONNECTED,
            ConnectionState.FAILED,
        ],
        ConnectionState.CONNECTED: [ConnectionState.CONNECTING],
        ConnectionState.FAILED: [ConnectionState.CONNECTING],
    }

    def __init__(self, initial_state: ConnectionState = ConnectionState.DISCONNECTED):
        self._state = initial_state
        self._listeners: list[StateTransitionCallback] = []

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if the last connect attempt succeeded."""
        return self._state == ConnectionState.CONNECTED

    @property
    def is_connecting(self) -> bool:
        """Check if a connect attempt is in flight."""
        return self._state == ConnectionState.CONNECTING

    def can_transition_to(self, new_state: ConnectionState) -> bool:
        """Check if transition to new_state is valid."""
        return new_state in self.VALID_TRANSITIONS.get(self._state, [])

    def transition(self, new_state: ConnectionState) -> None:
        """
        Transition to a new state.

        Args:
            new_state: The target state.

        Raises:
            InvalidStateTransition: If the transition is not valid.
        """
        if not self.can_transition_to(new_state):
            raise InvalidStateTransition(self._state, new_state)

        old_state = self._state
        self._state = new_state

        for listener in self._listeners:
            try:
                listener(old_state, new_state)
            except Exception:
                # Don't let listener errors affect state machine
                logger.exception(
                    f"State listener failed on {old_state} -> {new_state}"
                )

    def on_transition(self, callback: StateTransitionCallback) -> None:
        """
        Register a callback for state transitions.

        Args:
            callback: Function called with (old_state, new_state) on transitions.
        """
        self._listeners.append(callback)

    def remove_listener(self, callback: StateTransitionCallback) -> None:
        """
        Remove a previously registered callback.

        Args:
            callback: The callback to remove.
        """
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    def __str__(self) -> str:
        return f"ConnectionStateMachine({self._state.name})"

    def __repr__(self) -> str:
        return f"ConnectionStateMachine(state={self._state!r})"
