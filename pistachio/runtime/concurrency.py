# pistachio/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Mapping, Optional

from pistachio.core.definition import MachineConfig
from pistachio.core.hooks import Listener, Unsubscribe
from pistachio.core.machine import Machine


def get_lock() -> threading.RLock:
    """
    Provide a new re-entrant lock. Re-entrancy lets a guard, action or
    listener call back into the machine on the same thread without
    deadlocking; the machine's own latch then decides what happens.
    """
    return threading.RLock()


@contextmanager
def with_lock(lock: threading.RLock):
    """
    A convenience context manager that acquires the given lock upon entry and
    releases it upon exit.
    """
    lock.acquire()
    try:
        yield
    finally:
        lock.release()


class SynchronizedMachine(Machine):
    """
    A Machine that may be driven from several threads.

    Every public operation that reads or writes owned state runs under one
    re-entrant lock, so at most one dispatch is in flight across all threads.
    Same-thread re-entrant sends are still dropped by the dispatch latch.
    """

    def __init__(self, config: MachineConfig, lock: Optional[threading.RLock] = None) -> None:
        """
        :param config: The machine definition.
        :param lock: Optional lock to share with other code; a new one is created otherwise.
        """
        self._lock = lock or get_lock()
        super().__init__(config)

    @property
    def running(self) -> bool:
        with with_lock(self._lock):
            return self._running

    def __repr__(self) -> str:
        with with_lock(self._lock):
            return super().__repr__()

    def start(self) -> None:
        with with_lock(self._lock):
            super().start()

    def stop(self) -> None:
        with with_lock(self._lock):
            super().stop()

    def send(self, event: Mapping[str, Any]) -> None:
        with with_lock(self._lock):
            super().send(event)

    def subscribe(self, listener: Listener, immediate: bool = True) -> Unsubscribe:
        with with_lock(self._lock):
            unsubscribe = super().subscribe(listener, immediate=immediate)

        def locked_unsubscribe() -> None:
            with with_lock(self._lock):
                unsubscribe()

        return locked_unsubscribe

    def sync_props(self, props: Mapping[str, Any]) -> None:
        with with_lock(self._lock):
            super().sync_props(props)

    def matches(self, *states: str) -> bool:
        with with_lock(self._lock):
            return super().matches(*states)

    def get_state(self) -> str:
        with with_lock(self._lock):
            return super().get_state()

    def get_context(self) -> Mapping[str, Any]:
        with with_lock(self._lock):
            return super().get_context()

    def get_props(self) -> Mapping[str, Any]:
        with with_lock(self._lock):
            return super().get_props()
