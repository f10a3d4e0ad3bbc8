# pistachio/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pistachio.core.errors import ConfigurationError

WILDCARD = "*"

_MAPPING_KEYS = {"from", "event", "to", "action", "guard", "priority"}


@dataclass(frozen=True)
class Transition:
    """
    Defines a possible path from one state to another, optionally gated by a
    named guard and paired with a named action. When several transitions are
    enabled for the same event, the one with the highest priority is taken;
    ties go to the transition declared first.

    :param source: The origin state tag, or WILDCARD to match any state.
    :param event: The event type tag that triggers this transition.
    :param target: The destination state tag.
    :param action: Optional name of the action to run once the transition is taken.
    :param guard: Optional name of the guard that must approve the transition.
    :param priority: Numeric priority; higher priority transitions are chosen first.
    """

    source: str
    event: str
    target: str
    action: Optional[str] = None
    guard: Optional[str] = None
    priority: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Transition":
        """
        Build a transition from a plain mapping using the ``from``/``event``/``to``
        keys, plus the optional ``action``, ``guard`` and ``priority`` keys.

        :raises ConfigurationError: If keys are unknown or required keys are missing.
        """
        unknown = set(data) - _MAPPING_KEYS
        if unknown:
            raise ConfigurationError(
                f"Unknown transition option(s): {', '.join(sorted(unknown))}",
                details={"options": sorted(unknown)},
            )
        missing = [key for key in ("from", "event", "to") if key not in data]
        if missing:
            raise ConfigurationError(
                f"Transition is missing required option(s): {', '.join(missing)}",
                details={"options": missing},
            )

        priority = data.get("priority")
        if priority is None:
            priority = 0
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise ConfigurationError(f"Transition priority must be an integer, got {priority!r}")

        return cls(
            source=data["from"],
            event=data["event"],
            target=data["to"],
            action=data.get("action"),
            guard=data.get("guard"),
            priority=priority,
        )

    def is_triggered_by(self, state: str, event_type: Optional[str]) -> bool:
        """Return True if this transition leaves ``state`` on events of ``event_type``."""
        return (self.source == WILDCARD or self.source == state) and self.event == event_type
