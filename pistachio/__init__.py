"""pistachio: a small, deterministic finite state machine runtime

A machine is described declaratively (initial state, ordered transition
table, named guards and actions, initial context and props) and built with
``create_machine``. The resulting instance accepts events, resolves the
enabled transition by priority and declaration order, updates its context
from the action's result and notifies subscribers with frozen snapshots.

Example::

    machine = create_machine(
        initial="green",
        context={"count": 0},
        transitions=[{"from": "green", "event": "TOGGLE", "to": "red", "action": "increment"}],
        actions={"increment": lambda params: {"count": params.context["count"] + 1}},
    )
    machine.start()
    machine.send({"type": "TOGGLE"})
    assert machine.get_state() == "red"

Logging:
    Diagnostics go through the standard ``logging`` module under the
    ``pistachio`` logger hierarchy. The library installs no handlers.
"""

from .core import (
    WILDCARD,
    ActionNotFoundError,
    ConfigurationError,
    Event,
    GuardNotFoundError,
    Machine,
    MachineConfig,
    MachineParams,
    PistachioError,
    Transition,
    ValidationError,
    Validator,
    filter_items,
    freeze,
    merge,
    stable_sort,
)
from .factory import create_machine
from .runtime import SynchronizedMachine

__version__ = "0.1.0"

__all__ = [
    "create_machine",
    "Machine",
    "SynchronizedMachine",
    "MachineConfig",
    "MachineParams",
    "Transition",
    "Event",
    "WILDCARD",
    "Validator",
    "PistachioError",
    "ConfigurationError",
    "GuardNotFoundError",
    "ActionNotFoundError",
    "ValidationError",
    "filter_items",
    "stable_sort",
    "merge",
    "freeze",
]
