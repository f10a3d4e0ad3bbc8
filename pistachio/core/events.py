# pistachio/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from collections import abc
from typing import Any, Dict, Iterator, Mapping, Optional


class Event(abc.Mapping):
    """
    Represents a signal sent to a machine. An event is a read-only mapping
    whose ``"type"`` key selects the transitions to evaluate; every other key
    is payload that guards and actions may inspect.

    Plain dicts such as ``{"type": "TOGGLE"}`` are accepted wherever an Event
    is, and compare equal to the equivalent Event.
    """

    def __init__(self, type: str, **payload: Any) -> None:
        """
        :param type: The event type tag.
        :param payload: Additional data carried by the event.
        """
        self._data: Dict[str, Any] = {"type": type, **payload}

    @property
    def type(self) -> str:
        """The event type tag."""
        return self._data["type"]

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        payload = ", ".join(f"{key}={value!r}" for key, value in self._data.items() if key != "type")
        return f"Event({self.type!r}{', ' + payload if payload else ''})"


def get_event_type(event: Mapping[str, Any]) -> Optional[str]:
    """Return the type tag of an event mapping, or None if it carries none."""
    return event.get("type")
