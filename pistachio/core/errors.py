# pistachio/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class PistachioError(Exception):
    """
    Base exception class for errors raised by the machine runtime.

    :param message: Human readable description of the failure.
    :param details: Optional structured data describing the failure.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PistachioError):
    """
    Raised when a machine definition is malformed or references a handler
    that was never registered.
    """


class GuardNotFoundError(ConfigurationError):
    """
    Raised from send() when a candidate transition names a guard that is
    absent from the guards mapping.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f'Guard "{name}" not found.', details={"guard": name})
        self.name = name


class ActionNotFoundError(ConfigurationError):
    """
    Raised from send() when the winning transition names an action that is
    absent from the actions mapping. The state change is already committed
    when this is raised.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f'Action "{name}" not found.', details={"action": name})
        self.name = name


class ValidationError(ConfigurationError):
    """
    Raised by the Validator when eager checks find problems in a definition.
    """
