"""Unit tests for the lifecycle state machine."""

from __future__ import annotations

import asyncio

import pytest

from genesyscloud.data.core import (
    ClientNotConnectedError,
    CloseUnavailableError,
    ConnectUnavailableError,
    InternalError,
    LifecycleState,
)
from genesyscloud.data.runtime.lifecycle import LifecycleStateMachine


def created_machine() -> LifecycleStateMachine:
    machine = LifecycleStateMachine()
    machine.transition(LifecycleState.CREATED)
    return machine


async def noop() -> None:
    return None


class TestTransitions:
    """Test transition validation and events."""

    def test_initial_transition(self):
        """Test the first transition goes from no state to CREATED."""
        machine = LifecycleStateMachine()
        events = []
        machine.subscribe(events.append)

        event = machine.transition(LifecycleState.CREATED)

        assert machine.state is LifecycleState.CREATED
        assert event.previous_state is None
        assert event.new_state == "CREATED"
        assert events == [event]

    def test_invalid_transition(self):
        """Test a transition outside the table raises InternalError."""
        machine = created_machine()

        with pytest.raises(InternalError, match='from "CREATED" to "CLOSED"'):
            machine.transition(LifecycleState.CLOSED)
        assert machine.state is LifecycleState.CREATED

    def test_require_connected(self):
        """Test data operations are gated on CONNECTED."""
        machine = created_machine()
        with pytest.raises(ClientNotConnectedError):
            machine.require_connected()


class TestConnectAndClose:
    """Test shared connect/close tasks."""

    @pytest.mark.asyncio
    async def test_connect_success(self):
        """Test connect moves through CONNECTING to CONNECTED."""
        machine = created_machine()

        task = machine.begin_connect(noop)

        assert machine.state is LifecycleState.CONNECTING
        assert await task is True
        assert machine.state is LifecycleState.CONNECTED

    @pytest.mark.asyncio
    async def test_connect_while_connecting_returns_same_task(self):
        """Test concurrent connect calls share one task and one operation."""
        machine = created_machine()
        calls = 0
        release = asyncio.Event()

        async def operation():
            nonlocal calls
            calls += 1
            await release.wait()

        first = machine.begin_connect(operation)
        second = machine.begin_connect(operation)
        release.set()

        assert first is second
        assert await first is True
        assert calls == 1

    @pytest.mark.asyncio
    async def test_connect_unavailable(self):
        """Test connect is refused once connected."""
        machine = created_machine()
        await machine.begin_connect(noop)

        with pytest.raises(ConnectUnavailableError):
            machine.begin_connect(noop)

    @pytest.mark.asyncio
    async def test_connect_failure_moves_to_failed(self):
        """Test a failing operation moves the machine to FAILED."""
        machine = created_machine()

        async def operation():
            raise InternalError("nope")

        with pytest.raises(InternalError):
            await machine.begin_connect(operation)
        assert machine.state is LifecycleState.FAILED

        with pytest.raises(ConnectUnavailableError):
            machine.begin_connect(noop)
        with pytest.raises(CloseUnavailableError):
            machine.begin_close(noop)

    @pytest.mark.asyncio
    async def test_close_requires_connected(self):
        """Test close is refused before connecting."""
        machine = created_machine()
        with pytest.raises(CloseUnavailableError):
            machine.begin_close(noop)

    @pytest.mark.asyncio
    async def test_close_returns_stored_task(self):
        """Test close while closing or closed returns the same task."""
        machine = created_machine()
        await machine.begin_connect(noop)

        first = machine.begin_close(noop)
        second = machine.begin_close(noop)
        assert first is second
        assert await first is True
        assert machine.state is LifecycleState.CLOSED
        assert machine.begin_close(noop) is first

    @pytest.mark.asyncio
    async def test_close_failure_moves_to_failed(self):
        """Test a failing close moves the machine to FAILED."""
        machine = created_machine()
        await machine.begin_connect(noop)

        async def operation():
            raise RuntimeError("socket gone")

        with pytest.raises(RuntimeError):
            await machine.begin_close(operation)
        assert machine.state is LifecycleState.FAILED


class TestListeners:
    """Test the state-change channel."""

    @pytest.mark.asyncio
    async def test_listener_receives_every_transition(self):
        """Test one event per transition, in order."""
        machine = created_machine()
        events = []
        machine.subscribe(events.append)

        await machine.begin_connect(noop)
        await machine.begin_close(noop)

        assert [(e.previous_state, e.new_state) for e in events] == [
            ("CREATED", "CONNECTING"),
            ("CONNECTING", "CONNECTED"),
            ("CONNECTED", "CLOSING"),
            ("CLOSING", "CLOSED"),
        ]

    @pytest.mark.asyncio
    async def test_listeners_released_after_close(self):
        """Test listeners are cleared once CLOSED."""
        machine = created_machine()
        machine.subscribe(lambda event: None)

        await machine.begin_connect(noop)
        await machine.begin_close(noop)

        assert machine.listener_count == 0

    @pytest.mark.asyncio
    async def test_async_listener(self):
        """Test coroutine listeners are scheduled."""
        machine = created_machine()
        received = []

        async def listener(event):
            received.append(event.new_state)

        machine.subscribe(listener)
        await machine.begin_connect(noop)
        await asyncio.sleep(0)

        assert received == ["CONNECTING", "CONNECTED"]

    @pytest.mark.asyncio
    async def test_async_listener_tasks_are_retained_until_done(self):
        """Test pending listener tasks are referenced until they finish."""
        machine = created_machine()
        gate = asyncio.Event()

        async def listener(event):
            await gate.wait()

        machine.subscribe(listener)
        await machine.begin_connect(noop)

        pending = set(machine._listener_tasks)
        assert len(pending) == 2

        gate.set()
        await asyncio.wait(pending)
        await asyncio.sleep(0)

        assert machine._listener_tasks == set()

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_break_others(self, caplog):
        """Test a raising listener is logged and others still run."""
        machine = created_machine()
        events = []

        def broken(event):
            raise ValueError("listener bug")

        machine.subscribe(broken)
        machine.subscribe(events.append)

        await machine.begin_connect(noop)

        assert len(events) == 2
        assert "listener bug" in caplog.text

    def test_unsubscribe(self):
        """Test unsubscribed listeners stop receiving events."""
        machine = LifecycleStateMachine()
        events = []
        machine.subscribe(events.append)
        machine.unsubscribe(events.append)
        machine.unsubscribe(events.append)

        machine.transition(LifecycleState.CREATED)

        assert events == []
