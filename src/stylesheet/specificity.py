"""Specificity comparator and the stable ordering of style rules.

A rule is less specific than another when it targets a strict superclass of
the other's target, or, on the same target, when it carries no marker (or a
broader marker) where the other carries a narrower one. The relation is only
a partial order: rules on unrelated classes, or with unrelated markers on the
same class, are incomparable.
"""

from __future__ import annotations

import heapq
from typing import Iterable

from stylesheet.errors import SpecificityCycleError
from stylesheet.oracle import DEFAULT_ORACLE, TypeOracle
from stylesheet.style import Style

__all__ = ["is_less_specific", "sort_styles"]


def _is_less_specific_marker(a: Style, b: Style, oracle: TypeOracle) -> bool:
    if a.marker is None:
        return b.marker is not None
    if b.marker is None or oracle.type_equals(a.marker, b.marker):
        return False
    return oracle.capability_conforms_to(b.marker, a.marker)


def is_less_specific(a: Style, b: Style, oracle: TypeOracle = DEFAULT_ORACLE) -> bool:
    """Return True if *a* must be applied before *b*."""
    if oracle.type_equals(a.target, b.target):
        return _is_less_specific_marker(a, b, oracle)
    if a.target is object:
        return True
    return oracle.is_subtype(b.target, a.target)


def sort_styles(styles: Iterable[Style], oracle: TypeOracle = DEFAULT_ORACLE) -> list[Style]:
    """Order *styles* from least to most specific.

    Sorting is a topological sort over :func:`is_less_specific`. Whenever
    several rules are free to go next, the one given first in the input wins,
    so incomparable rules keep their input order wherever the partial order
    allows it.
    """
    items = list(styles)
    count = len(items)
    successors: list[list[int]] = [[] for _ in range(count)]
    pending = [0] * count

    for i in range(count):
        for j in range(count):
            if i != j and is_less_specific(items[i], items[j], oracle):
                successors[i].append(j)
                pending[j] += 1

    ready = [i for i in range(count) if pending[i] == 0]
    heapq.heapify(ready)
    order: list[int] = []
    while ready:
        i = heapq.heappop(ready)
        order.append(i)
        for j in successors[i]:
            pending[j] -= 1
            if pending[j] == 0:
                heapq.heappush(ready, j)

    if len(order) != count:
        placed = set(order)
        raise SpecificityCycleError(items[i].key for i in range(count) if i not in placed)
    return [items[i] for i in order]
