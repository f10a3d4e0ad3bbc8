# tests/unit/test_definition.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import pytest

from pistachio.core.definition import MachineConfig, MachineParams
from pistachio.core.errors import ConfigurationError
from pistachio.core.transitions import Transition


def test_defaults() -> None:
    config = MachineConfig(initial="idle")
    assert config.id is None
    assert config.transitions == ()
    assert config.context == {}
    assert config.props == {}
    assert config.actions == {}
    assert config.guards == {}


def test_transition_mappings_are_normalized() -> None:
    config = MachineConfig(
        initial="idle",
        transitions=[{"from": "idle", "event": "GO", "to": "busy"}, Transition("busy", "DONE", "idle")],
    )
    assert config.transitions == (Transition("idle", "GO", "busy"), Transition("busy", "DONE", "idle"))


def test_invalid_transition_type() -> None:
    with pytest.raises(ConfigurationError, match="str"):
        MachineConfig(initial="idle", transitions=["idle->busy"])


def test_containers_are_copied_and_read_only() -> None:
    context = {"count": 1}
    config = MachineConfig(initial="idle", context=context)
    context["count"] = 2
    assert config.context == {"count": 1}
    with pytest.raises(TypeError):
        config.context["count"] = 3


def test_from_mapping() -> None:
    handler = lambda params: None  # noqa: E731
    config = MachineConfig.from_mapping(
        {
            "id": "m",
            "initial": "idle",
            "context": {"a": 1},
            "props": {"b": 2},
            "transitions": [{"from": "idle", "event": "GO", "to": "busy", "action": "run"}],
            "actions": {"run": handler},
            "guards": {},
        }
    )
    assert config.id == "m"
    assert config.initial == "idle"
    assert config.context == {"a": 1}
    assert config.props == {"b": 2}
    assert config.transitions[0].action == "run"
    assert config.actions["run"] is handler


def test_from_mapping_none_values_use_defaults() -> None:
    config = MachineConfig.from_mapping({"initial": "idle", "transitions": [], "context": None, "actions": None})
    assert config.context == {}
    assert config.actions == {}


@pytest.mark.parametrize("missing", ["initial", "transitions"])
def test_from_mapping_requires_options(missing) -> None:
    options = {"initial": "idle", "transitions": []}
    del options[missing]
    with pytest.raises(ConfigurationError, match=missing) as excinfo:
        MachineConfig.from_mapping(options)
    assert excinfo.value.details == {"option": missing}


def test_from_mapping_unknown_options() -> None:
    with pytest.raises(ConfigurationError, match="states, timers"):
        MachineConfig.from_mapping({"initial": "idle", "transitions": [], "timers": [], "states": []})


def test_params_are_frozen_values() -> None:
    params = MachineParams(context={}, event={"type": "GO"}, props={})
    with pytest.raises(AttributeError):
        params.context = {"a": 1}
