# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
import threading
from unittest.mock import MagicMock

import pytest

from pistachio import MachineConfig, Transition, create_machine


@pytest.fixture
def toggle_transitions():
    """A two-state toggle table: green <-> red."""
    return [
        {"from": "green", "event": "TOGGLE", "to": "red"},
        {"from": "red", "event": "TOGGLE", "to": "green"},
    ]


@pytest.fixture
def light(toggle_transitions):
    """A started traffic light machine with no handlers."""
    machine = create_machine(initial="green", transitions=toggle_transitions)
    machine.start()
    return machine


@pytest.fixture
def counter_config():
    """A config whose TOGGLE transition increments a counter, gated by max_count."""
    return MachineConfig(
        id="counter",
        initial="green",
        context={"count": 0},
        props={"max_count": 5},
        transitions=(
            Transition("green", "TOGGLE", "red", action="increment", guard="can_increment"),
            Transition("red", "TOGGLE", "green", action="increment", guard="can_increment"),
            Transition("*", "RESET", "green", action="reset"),
        ),
        actions={
            "increment": lambda params: {"count": params.context["count"] + 1},
            "reset": lambda params: {"count": 0},
        },
        guards={
            "can_increment": lambda params: params.context["count"] < params.props["max_count"],
        },
    )


@pytest.fixture
def listener():
    """A listener spy."""
    return MagicMock(name="listener")


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the pistachio logger hierarchy."""
    caplog.set_level(logging.DEBUG, logger="pistachio")
    return caplog


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive():
            thread.join(timeout=1.0)
