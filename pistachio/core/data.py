# pistachio/core/data.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Plain-data helpers used by the machine runtime to select transitions and to
hand out read-only snapshots of context and props.
"""

import copy
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar("T")


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return the items satisfying ``predicate``, in their original order."""
    return [item for item in items if predicate(item)]


def stable_sort(items: Iterable[T], key: Callable[[T], Any], reverse: bool = False) -> List[T]:
    """
    Return a new list ordered by ``key``. Items with equal keys keep their
    relative order, including when ``reverse`` is True.
    """
    return sorted(items, key=key, reverse=reverse)


def merge(base: Optional[Mapping[str, Any]], update: Optional[Mapping[str, Any]]) -> dict:
    """
    Shallow union of two mappings. Keys from ``update`` take precedence; the
    inputs are never modified.
    """
    merged = dict(base or {})
    merged.update(update or {})
    return merged


def freeze(value: Any) -> Any:
    """
    Return an independent, read-only copy of ``value``.

    Mappings, including mappings nested in mappings, become read-only mapping
    proxies over a private copy. Every other value is deep-copied, so
    sequences and sets keep their type and no snapshot shares mutable state
    with the owner or with another snapshot.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    return copy.deepcopy(value)
