"""
Core package: machine definitions, the machine runtime and the helpers it
relies on.
"""

from .errors import (
    ActionNotFoundError,
    ConfigurationError,
    GuardNotFoundError,
    PistachioError,
    ValidationError,
)
from .data import filter_items, freeze, merge, stable_sort
from .events import Event
from .transitions import WILDCARD, Transition
from .definition import MachineConfig, MachineParams
from .validations import Validator
from .hooks import ListenerRegistry
from .machine import Machine

__all__ = [
    # Errors
    "PistachioError",
    "ConfigurationError",
    "GuardNotFoundError",
    "ActionNotFoundError",
    "ValidationError",
    # Data helpers
    "filter_items",
    "stable_sort",
    "merge",
    "freeze",
    # Definition
    "Event",
    "Transition",
    "WILDCARD",
    "MachineConfig",
    "MachineParams",
    "Validator",
    # Runtime
    "ListenerRegistry",
    "Machine",
]
