# pistachio/factory.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Mapping, Optional, Union

from pistachio.core.definition import MachineConfig
from pistachio.core.errors import ConfigurationError
from pistachio.core.machine import Machine
from pistachio.core.validations import Validator
from pistachio.runtime.concurrency import SynchronizedMachine


def create_machine(
    config: Optional[Union[MachineConfig, Mapping[str, Any]]] = None,
    *,
    validate: bool = False,
    thread_safe: bool = False,
    **options: Any,
) -> Machine:
    """
    Create a machine instance from a definition.

    The definition may be a MachineConfig, a mapping of options, or given
    directly as keyword options::

        machine = create_machine(
            initial="green",
            transitions=[{"from": "green", "event": "TOGGLE", "to": "red"}],
        )

    :param config: A MachineConfig or a mapping of options.
    :param validate: Check eagerly that every named guard and action exists.
    :param thread_safe: Return a SynchronizedMachine for multi-threaded use.
    :param options: Options used when ``config`` is omitted.
    :raises ConfigurationError: If the definition is malformed.
    :raises ValidationError: If ``validate`` is set and the definition has problems.
    """
    if config is not None and options:
        raise ConfigurationError("Pass either a config or keyword options, not both")

    if isinstance(config, MachineConfig):
        definition = config
    else:
        definition = MachineConfig.from_mapping(config if config is not None else options)

    if validate:
        Validator().validate(definition)

    if thread_safe:
        return SynchronizedMachine(definition)
    return Machine(definition)
