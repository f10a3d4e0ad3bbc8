# tests/unit/test_validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import pytest

from pistachio import create_machine
from pistachio.core.definition import MachineConfig
from pistachio.core.errors import ValidationError
from pistachio.core.transitions import Transition
from pistachio.core.validations import Validator


@pytest.fixture
def validator() -> Validator:
    return Validator()


def test_valid_config_passes(validator, counter_config) -> None:
    validator.validate(counter_config)
    assert validator.collect_errors(counter_config) == []


def test_missing_handlers_are_reported(validator) -> None:
    config = MachineConfig(
        initial="green",
        transitions=[
            Transition("green", "TOGGLE", "red", guard="can_go"),
            Transition("red", "TOGGLE", "green", action="count"),
        ],
    )
    with pytest.raises(ValidationError) as excinfo:
        validator.validate(config)

    errors = excinfo.value.details["errors"]
    assert errors == [
        'Transition #0 references guard "can_go" which is not registered.',
        'Transition #1 references action "count" which is not registered.',
    ]
    assert 'guard "can_go"' in str(excinfo.value)


def test_empty_tags_are_reported(validator) -> None:
    config = MachineConfig(initial="", transitions=[Transition("", "GO", "b"), Transition("a", "GO", None)])
    errors = validator.collect_errors(config)
    assert "Machine must have a non-empty initial state." in errors
    assert "Transition #0 must have a non-empty source." in errors
    assert "Transition #1 must have a non-empty target." in errors


def test_non_callable_handlers_are_reported(validator) -> None:
    config = MachineConfig(initial="a", actions={"run": "not callable"}, guards={"ok": 42})
    assert validator.collect_errors(config) == ['Guard "ok" must be callable.', 'Action "run" must be callable.']


def test_create_machine_validates_on_request() -> None:
    options = {"initial": "green", "transitions": [{"from": "green", "event": "GO", "to": "red", "guard": "nope"}]}
    with pytest.raises(ValidationError):
        create_machine(options, validate=True)
    # without eager validation the problem only surfaces during dispatch
    assert create_machine(options).get_state() == "green"
