# pistachio/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, Callable, List, Mapping

logger = logging.getLogger(__name__)

Listener = Callable[[str, Mapping[str, Any], Mapping[str, Any]], None]
Unsubscribe = Callable[[], None]


class ListenerRegistry:
    """
    Manages the listeners subscribed to a machine and delivers snapshots to
    them. Users can attach logging, rendering or other side effects without
    touching the machine's transition logic.
    """

    def __init__(self, owner: str = "machine") -> None:
        """
        :param owner: Label used in diagnostics when a listener fails.
        """
        self._owner = owner
        # a list rather than a set so unhashable callables can subscribe
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return any(existing is listener or existing == listener for existing in self._listeners)

    def add(self, listener: Listener) -> Unsubscribe:
        """
        Register a listener. Registering the same callable twice keeps a
        single registration.

        :return: A callable removing exactly this listener; extra calls are no-ops.
        """
        if listener not in self:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            self.remove(listener)

        return unsubscribe

    def remove(self, listener: Listener) -> None:
        """Remove a listener if registered."""
        self._listeners = [
            existing for existing in self._listeners if not (existing is listener or existing == listener)
        ]

    def snapshot(self) -> List[Listener]:
        """Return the currently registered listeners in registration order."""
        return list(self._listeners)

    def notify(self, state: str, context: Mapping[str, Any], props: Mapping[str, Any]) -> None:
        """
        Call every listener registered when the pass starts.

        A listener removed during the pass is skipped if its turn has not come
        yet. A listener that raises is logged and the pass continues.
        """
        for listener in self.snapshot():
            if listener not in self:
                continue
            try:
                listener(state, context, props)
            except Exception:
                logger.exception("Listener error in %s while notifying state %r", self._owner, state)
