"""StyleSheet: an immutable, specificity-ordered collection of style rules."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, overload

from stylesheet.errors import DuplicateStyleError
from stylesheet.oracle import DEFAULT_ORACLE, TypeOracle
from stylesheet.specificity import sort_styles
from stylesheet.style import Style, StyleKey

__all__ = ["StyleSheet"]

logger = logging.getLogger(__name__)


class StyleSheet:
    """Rules sorted from least to most specific, free of redundant rules.

    Applying the sheet runs every matching rule in that order, so when two
    rules assign the same attribute the more specific one is observed last.

    Construction raises :class:`DuplicateStyleError` when two rules share a
    (target, marker) identity; no partially built sheet is ever returned.
    """

    __slots__ = ("_styles", "_oracle")

    def __init__(self, styles: Iterable[Style] = (), oracle: TypeOracle = DEFAULT_ORACLE) -> None:
        ordered = sort_styles(styles, oracle)
        seen: set[StyleKey] = set()
        for s in ordered:
            if s.key in seen:
                raise DuplicateStyleError(s.key)
            seen.add(s.key)
        self._styles: tuple[Style, ...] = tuple(ordered)
        self._oracle = oracle
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built stylesheet with %d style(s): %s",
                len(ordered),
                ", ".join(str(s.key) for s in ordered),
            )

    @classmethod
    def build(cls, styles: Iterable[Style], oracle: TypeOracle = DEFAULT_ORACLE) -> StyleSheet:
        return cls(styles, oracle)

    # --- sequence access ------------------------------------------------------

    @property
    def styles(self) -> tuple[Style, ...]:
        return self._styles

    def keys(self) -> list[StyleKey]:
        return [s.key for s in self._styles]

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[Style]:
        return iter(self._styles)

    @overload
    def __getitem__(self, index: int) -> Style: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Style, ...]: ...

    def __getitem__(self, index):
        return self._styles[index]

    def __repr__(self) -> str:
        keys = ", ".join(str(k) for k in self.keys())
        return f"StyleSheet([{keys}])"

    # --- resolution -------------------------------------------------------------

    def resolve(self, cls: type, marker: type | None = None) -> list[Style]:
        """Return the rules that would fire for an instance of *cls*, in order."""
        return [s for s in self._styles if s.matches(cls, marker, self._oracle)]

    def apply(self, instance: Any, marker: type | None = None) -> int:
        """Style *instance* in place and return how many rules fired.

        With a *marker* override only rules tagged with exactly that marker
        run, regardless of the capabilities the instance actually has.
        """
        fired = 0
        for s in self._styles:
            if s.try_apply(instance, marker, self._oracle):
                logger.debug("Applied style %s to %r", s.key, instance)
                fired += 1
        return fired
