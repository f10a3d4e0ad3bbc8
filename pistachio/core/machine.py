# pistachio/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

from pistachio.core.data import filter_items, freeze, merge, stable_sort
from pistachio.core.definition import MachineConfig, MachineParams
from pistachio.core.errors import ActionNotFoundError, GuardNotFoundError
from pistachio.core.events import get_event_type
from pistachio.core.hooks import Listener, ListenerRegistry, Unsubscribe
from pistachio.core.transitions import Transition

logger = logging.getLogger(__name__)


class Machine:
    """
    A live, mutable finite state machine built from a MachineConfig.

    The machine owns its current state, its context and its props. Callers
    only ever receive frozen snapshots of context and props; internally both
    are replaced wholesale, never mutated in place.

    Events are processed synchronously. ``send`` called from inside a guard,
    action or listener while a dispatch is in progress is dropped. This latch
    only protects against recursion on the same call stack; use
    SynchronizedMachine when several threads drive one instance.
    """

    def __init__(self, config: MachineConfig) -> None:
        """
        :param config: The machine definition.
        """
        self._config = config
        self._state: str = config.initial
        self._context: Dict[str, Any] = copy.deepcopy(dict(config.context))
        self._props: Dict[str, Any] = copy.deepcopy(dict(config.props))
        self._listeners = ListenerRegistry(owner=self._label())
        self._running = False
        self._dispatching = False

    @property
    def id(self) -> Optional[str]:
        """The label given in the configuration, if any."""
        return self._config.id

    @property
    def running(self) -> bool:
        """True between start() and stop()."""
        return self._running

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, state={self._state!r}, running={self._running})"

    def _label(self) -> str:
        return f"machine {self._config.id!r}" if self._config.id is not None else "machine"

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Start accepting events. Calling start on a running machine does nothing."""
        if self._running:
            return
        self._running = True
        logger.debug("Started %s in state %r", self._label(), self._state)

    def stop(self) -> None:
        """
        Stop accepting events. Events sent while stopped are discarded.
        Listeners stay registered.
        """
        if not self._running:
            return
        self._running = False
        logger.debug("Stopped %s in state %r", self._label(), self._state)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def send(self, event: Mapping[str, Any]) -> None:
        """
        Process an event: pick the highest-priority enabled transition, move
        to its target, run its action and notify listeners.

        :param event: A mapping with a ``"type"`` key.
        :raises GuardNotFoundError: If a candidate transition names an unknown guard.
        :raises ActionNotFoundError: If the chosen transition names an unknown
            action. The new state is kept.
        """
        if not self._running:
            logger.debug("Dropped event %r: %s is not running", get_event_type(event), self._label())
            return
        if self._dispatching:
            logger.debug("Dropped re-entrant event %r on %s", get_event_type(event), self._label())
            return

        self._dispatching = True
        try:
            self._dispatch(event)
        finally:
            self._dispatching = False

    def _dispatch(self, event: Mapping[str, Any]) -> None:
        candidates = self._enabled_transitions(event)
        if not candidates:
            logger.debug("No transition for event %r in state %r", get_event_type(event), self._state)
            return

        transition = stable_sort(candidates, key=lambda t: t.priority, reverse=True)[0]

        source = self._state
        self._state = transition.target
        logger.debug("%s: %r -> %r on %r", self._label(), source, transition.target, transition.event)

        if transition.action is not None:
            handler = self._config.actions.get(transition.action)
            if handler is None:
                raise ActionNotFoundError(transition.action)
            result = handler(self._params(event))
            if isinstance(result, Mapping) and result:
                self._context = merge(self._context, result)

        self._notify()

    def _enabled_transitions(self, event: Mapping[str, Any]) -> List[Transition]:
        event_type = get_event_type(event)

        def enabled(transition: Transition) -> bool:
            if not transition.is_triggered_by(self._state, event_type):
                return False
            if transition.guard is None:
                return True
            guard = self._config.guards.get(transition.guard)
            if guard is None:
                raise GuardNotFoundError(transition.guard)
            return bool(guard(self._params(event)))

        return filter_items(self._config.transitions, enabled)

    def _params(self, event: Mapping[str, Any]) -> MachineParams:
        return MachineParams(context=self.get_context(), event=event, props=self.get_props())

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Listener, immediate: bool = True) -> Unsubscribe:
        """
        Register a listener called with ``(state, context, props)`` after every
        transition and every sync_props().

        :param listener: The callback to register.
        :param immediate: Call the listener once with the current snapshot
            before returning.
        :return: A callable that unsubscribes this listener.
        """
        unsubscribe = self._listeners.add(listener)
        if immediate:
            listener(self._state, self.get_context(), self.get_props())
        return unsubscribe

    def _notify(self) -> None:
        self._listeners.notify(self._state, self.get_context(), self.get_props())

    # -------------------------------------------------------------------------
    # Props and accessors
    # -------------------------------------------------------------------------

    def sync_props(self, props: Mapping[str, Any]) -> None:
        """
        Merge externally-owned data into the machine's props and notify
        listeners. Keys not present in ``props`` keep their value.
        """
        self._props = merge(self._props, props)
        logger.debug("Synced props %s on %s", list(props), self._label())
        self._notify()

    def matches(self, *states: str) -> bool:
        """Return True if the current state is one of ``states``."""
        return self._state in states

    def get_state(self) -> str:
        """Return the current state tag."""
        return self._state

    def get_context(self) -> Mapping[str, Any]:
        """Return a frozen snapshot of the context."""
        return freeze(self._context)

    def get_props(self) -> Mapping[str, Any]:
        """Return a frozen snapshot of the props."""
        return freeze(self._props)
