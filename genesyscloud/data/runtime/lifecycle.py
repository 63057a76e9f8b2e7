"""Connection lifecycle state machine.

The machine owns the lifecycle state of a data utilities client, the in-flight
connect/close tasks and the state-change listeners:

- CREATED -connect-> CONNECTING -> CONNECTED | FAILED
- CONNECTED -close-> CLOSING -> CLOSED | FAILED

A second ``begin_connect`` while connecting (or ``begin_close`` while closing or
closed) returns the task already created for that transition.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..core.enums import LIFECYCLE_TRANSITIONS, LifecycleState
from ..core.exceptions import (
    ClientNotConnectedError,
    CloseUnavailableError,
    ConnectUnavailableError,
    InternalError,
)
from ..models.events import StateChangeEvent

logger = logging.getLogger(__name__)

StateListener = Callable[[StateChangeEvent], Awaitable[None]] | Callable[[StateChangeEvent], None]


class LifecycleStateMachine:
    """Validated lifecycle transitions with a listener channel."""

    def __init__(self, *, name: str = "client") -> None:
        self._name = name
        self._state: LifecycleState | None = None
        self._listeners: list[StateListener] = []
        self._listener_tasks: set[asyncio.Future] = set()
        self._connect_task: asyncio.Task[bool] | None = None
        self._close_task: asyncio.Task[bool] | None = None

    @property
    def state(self) -> LifecycleState | None:
        return self._state

    # ----------------------
    # Transitions
    # ----------------------
    def transition(self, new_state: LifecycleState) -> StateChangeEvent:
        """Move to ``new_state`` and notify listeners.

        Raises:
            InternalError: If the transition is not in the transition table
        """
        previous = self._state
        if new_state not in LIFECYCLE_TRANSITIONS.get(previous, frozenset()):
            raise InternalError(
                f'Invalid state transition from "{previous.value if previous else None}" '
                f'to "{new_state.value}".'
            )

        self._state = new_state
        event = StateChangeEvent(
            previous_state=previous.value if previous else None,
            new_state=new_state.value,
        )
        logger.debug(
            "state_changed",
            extra={
                "client": self._name,
                "previous_state": event.previous_state,
                "new_state": event.new_state,
            },
        )
        self._emit(event)
        return event

    def require_connected(self) -> None:
        """Raise ClientNotConnectedError unless the state is CONNECTED."""
        if self._state is not LifecycleState.CONNECTED:
            raise ClientNotConnectedError()

    def begin_connect(self, operation: Callable[[], Awaitable[Any]]) -> asyncio.Task[bool]:
        """Start (or join) the CREATED -> CONNECTED transition.

        Args:
            operation: Coroutine function performing the actual connection

        Returns:
            Task resolving to True once CONNECTED

        Raises:
            ConnectUnavailableError: If the state is neither CREATED nor CONNECTING
        """
        if self._state is LifecycleState.CONNECTING and self._connect_task is not None:
            return self._connect_task
        if self._state is not LifecycleState.CREATED:
            raise ConnectUnavailableError()

        loop = asyncio.get_running_loop()
        self.transition(LifecycleState.CONNECTING)
        self._connect_task = loop.create_task(self._run(operation, LifecycleState.CONNECTED))
        return self._connect_task

    def begin_close(self, operation: Callable[[], Awaitable[Any]]) -> asyncio.Task[bool]:
        """Start (or join) the CONNECTED -> CLOSED transition.

        Args:
            operation: Coroutine function performing the actual release

        Returns:
            Task resolving to True once CLOSED

        Raises:
            CloseUnavailableError: If the state is not CONNECTED, CLOSING or CLOSED
        """
        if (
            self._state in (LifecycleState.CLOSING, LifecycleState.CLOSED)
            and self._close_task is not None
        ):
            return self._close_task
        if self._state is not LifecycleState.CONNECTED:
            raise CloseUnavailableError()

        loop = asyncio.get_running_loop()
        self.transition(LifecycleState.CLOSING)
        self._close_task = loop.create_task(self._run(operation, LifecycleState.CLOSED))
        return self._close_task

    async def _run(self, operation: Callable[[], Awaitable[Any]], target: LifecycleState) -> bool:
        try:
            await operation()
        except (Exception, asyncio.CancelledError):
            self.transition(LifecycleState.FAILED)
            raise

        self.transition(target)
        if target is LifecycleState.CLOSED:
            self._listeners.clear()
        return True

    # ----------------------
    # Listeners
    # ----------------------
    def subscribe(self, listener: StateListener) -> None:
        """Register a listener for state change events."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self, event: StateChangeEvent) -> None:
        for listener in list(self._listeners):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    task = asyncio.ensure_future(result)
                    self._listener_tasks.add(task)
                    task.add_done_callback(self._listener_done)
            except Exception as e:
                logger.error(f"Error in state change listener: {e}")

    def _listener_done(self, task: asyncio.Future) -> None:
        self._listener_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Error in state change listener: {error}")
