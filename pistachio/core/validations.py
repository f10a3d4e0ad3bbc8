# pistachio/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List

from pistachio.core.definition import MachineConfig
from pistachio.core.errors import ValidationError
from pistachio.core.transitions import Transition


class Validator:
    """
    Performs construction-time validation of a machine definition, ensuring
    transitions are well-formed and every guard and action they name is
    registered.

    Validation is opt-in. Without it, a missing handler is only reported when
    a dispatch actually needs it.
    """

    def __init__(self) -> None:
        self._rules = _DefaultValidationRules

    def validate(self, config: MachineConfig) -> None:
        """
        Check the definition for consistency.

        :param config: The machine definition to validate.
        :raises ValidationError: Listing every problem found.
        """
        errors = self.collect_errors(config)
        if errors:
            raise ValidationError("\n".join(errors), details={"errors": errors})

    def collect_errors(self, config: MachineConfig) -> List[str]:
        """Return every problem found in the definition, without raising."""
        errors: List[str] = []
        errors.extend(self._rules.validate_initial(config))
        for index, transition in enumerate(config.transitions):
            errors.extend(self._rules.validate_transition(index, transition, config))
        errors.extend(self._rules.validate_handlers(config))
        return errors


class _DefaultValidationRules:
    """
    Built-in validation rules covering the basic correctness of a definition.
    """

    @staticmethod
    def validate_initial(config: MachineConfig) -> List[str]:
        if not isinstance(config.initial, str) or not config.initial:
            return ["Machine must have a non-empty initial state."]
        return []

    @staticmethod
    def validate_transition(index: int, transition: Transition, config: MachineConfig) -> List[str]:
        """
        Check that tags are non-empty strings and that named guards and
        actions exist.
        """
        errors = []
        for name in ("source", "event", "target"):
            value = getattr(transition, name)
            if not isinstance(value, str) or not value:
                errors.append(f"Transition #{index} must have a non-empty {name}.")
        if transition.guard is not None and transition.guard not in config.guards:
            errors.append(f'Transition #{index} references guard "{transition.guard}" which is not registered.')
        if transition.action is not None and transition.action not in config.actions:
            errors.append(f'Transition #{index} references action "{transition.action}" which is not registered.')
        return errors

    @staticmethod
    def validate_handlers(config: MachineConfig) -> List[str]:
        errors = []
        for kind, handlers in (("Guard", config.guards), ("Action", config.actions)):
            for name, handler in handlers.items():
                if not callable(handler):
                    errors.append(f'{kind} "{name}" must be callable.')
        return errors
