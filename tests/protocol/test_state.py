"""Tests for the connection state machine."""

import pytest

from neorest.protocol.state import (
    ConnectionState,
    ConnectionStateMachine,
    InvalidStateTransition,
)


class TestConnectionStateMachine:
    """Tests for ConnectionStateMachine transitions."""

    @pytest.fixture
    def machine(self):
        return ConnectionStateMachine()

    def test_starts_disconnected(self, machine):
        assert machine.state == ConnectionState.DISCONNECTED
        assert not machine.is_connected

    def test_successful_attempt(self, machine):
        machine.transition(ConnectionState.CONNECTING)
        assert machine.is_connecting
        machine.transition(ConnectionState.CONNECTED)
        assert machine.is_connected

    def test_failed_attempt_can_retry(self, machine):
        machine.transition(ConnectionState.CONNECTING)
        machine.transition(ConnectionState.FAILED)
        machine.transition(ConnectionState.CONNECTING)
        assert machine.is_connecting

    def test_reconnect_from_connected(self, machine):
        machine.transition(ConnectionState.CONNECTING)
        machine.transition(ConnectionState.CONNECTED)
        machine.transition(ConnectionState.CONNECTING)
        assert not machine.is_connected

    def test_cannot_connect_twice_concurrently(self, machine):
        machine.transition(ConnectionState.CONNECTING)
        with pytest.raises(InvalidStateTransition, match="CONNECTING -> CONNECTING"):
            machine.transition(ConnectionState.CONNECTING)

    def test_cannot_skip_connecting(self, machine):
        assert not machine.can_transition_to(ConnectionState.CONNECTED)
        with pytest.raises(InvalidStateTransition) as exc_info:
            machine.transition(ConnectionState.CONNECTED)
        assert exc_info.value.from_state == ConnectionState.DISCONNECTED
        assert exc_info.value.to_state == ConnectionState.CONNECTED

    def test_listeners_receive_transitions(self, machine):
        seen = []
        machine.on_transition(lambda old, new: seen.append((old, new)))

        machine.transition(ConnectionState.CONNECTING)

        assert seen == [(ConnectionState.DISCONNECTED, ConnectionState.CONNECTING)]

    def test_failing_listener_does_not_block_transition(self, machine):
        def broken(old, new):
            raise RuntimeError("listener bug")

        machine.on_transition(broken)
        machine.transition(ConnectionState.CONNECTING)

        assert machine.state == ConnectionState.CONNECTING

    def test_remove_listener(self, machine):
        seen = []
        listener = lambda old, new: seen.append(new)  # noqa: E731
        machine.on_transition(listener)
        machine.remove_listener(listener)
        machine.remove_listener(listener)

        machine.transition(ConnectionState.CONNECTING)

        assert seen == []

    def test_str(self, machine):
        assert str(machine) == "ConnectionStateMachine(DISCONNECTED)"
        assert str(ConnectionState.FAILED) == "FAILED"
