# pistachio/core/definition.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from pistachio.core.errors import ConfigurationError
from pistachio.core.transitions import Transition

_OPTIONS = ("id", "initial", "context", "props", "transitions", "actions", "guards")


@dataclass(frozen=True)
class MachineParams:
    """
    The single argument passed to guard and action handlers.

    ``context`` and ``props`` are frozen snapshots taken right before the
    handler runs.
    """

    context: Mapping[str, Any]
    event: Mapping[str, Any]
    props: Mapping[str, Any]


Action = Callable[[MachineParams], Optional[Mapping[str, Any]]]
Guard = Callable[[MachineParams], bool]
TransitionLike = Union[Transition, Mapping[str, Any]]


def _to_transition(item: TransitionLike) -> Transition:
    if isinstance(item, Transition):
        return item
    if isinstance(item, Mapping):
        return Transition.from_mapping(item)
    raise ConfigurationError(f"Transitions must be Transition objects or mappings, got {type(item).__name__}")


@dataclass(frozen=True)
class MachineConfig:
    """
    Immutable description of a machine: its initial state, transition table,
    handler maps and the initial context and props.

    Transition order matters: among enabled transitions of equal priority,
    the one declared first wins.
    """

    initial: str
    transitions: Tuple[Transition, ...] = ()
    id: Optional[str] = None
    context: Mapping[str, Any] = field(default_factory=dict)
    props: Mapping[str, Any] = field(default_factory=dict)
    actions: Mapping[str, Action] = field(default_factory=dict)
    guards: Mapping[str, Guard] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Normalize caller-supplied containers so later caller mutation cannot leak in.
        object.__setattr__(self, "transitions", tuple(_to_transition(t) for t in self.transitions))
        object.__setattr__(self, "context", MappingProxyType(dict(self.context or {})))
        object.__setattr__(self, "props", MappingProxyType(dict(self.props or {})))
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions or {})))
        object.__setattr__(self, "guards", MappingProxyType(dict(self.guards or {})))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "MachineConfig":
        """
        Build a config from a plain mapping of the recognized options.

        :raises ConfigurationError: On unknown options or a missing ``initial``
            or ``transitions`` option.
        """
        unknown = set(options) - set(_OPTIONS)
        if unknown:
            raise ConfigurationError(
                f"Unknown machine option(s): {', '.join(sorted(unknown))}",
                details={"options": sorted(unknown)},
            )
        for required in ("initial", "transitions"):
            if options.get(required) is None:
                raise ConfigurationError(f'Machine option "{required}" is required', details={"option": required})

        transitions: Sequence[TransitionLike] = options["transitions"]
        return cls(
            initial=options["initial"],
            transitions=tuple(transitions),
            id=options.get("id"),
            context=options.get("context") or {},
            props=options.get("props") or {},
            actions=options.get("actions") or {},
            guards=options.get("guards") or {},
        )
