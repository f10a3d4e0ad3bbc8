"""Runtime support for driving machines from several threads."""

from .concurrency import SynchronizedMachine, get_lock, with_lock

__all__ = ["SynchronizedMachine", "get_lock", "with_lock"]
