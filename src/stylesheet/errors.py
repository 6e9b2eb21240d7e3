"""Error hierarchy for stylesheet construction and the root style registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from stylesheet.style import StyleKey


class StyleSheetError(Exception):
    """Base error for all stylesheet errors."""


class DuplicateStyleError(StyleSheetError):
    """Two rules share the same (target, marker) identity."""

    def __init__(self, key: StyleKey) -> None:
        self.key = key
        super().__init__(f"Redundant styles for {key}")


class SpecificityCycleError(StyleSheetError):
    """The specificity relation over a rule set is not acyclic.

    Only reachable with a custom type oracle that reports an inconsistent
    subtype or conformance relation.
    """

    def __init__(self, keys: Iterable[StyleKey]) -> None:
        self.keys = tuple(keys)
        listed = ", ".join(str(k) for k in self.keys)
        super().__init__(f"Specificity cycle between styles: {listed}")


class InvalidStyleError(StyleSheetError, TypeError):
    """A style was declared with a target or marker that is not a class."""


# ---------------------------------------------------------------------------
# Root style registry
# ---------------------------------------------------------------------------


class RootStyleError(StyleSheetError):
    """Base error for the root style registry."""


class NotOnMainThreadError(RootStyleError):
    """The root stylesheet may only be installed from the main thread."""

    def __init__(self, message: str = "Root style must be set on the main thread") -> None:
        super().__init__(message)


class AlreadyInitializedError(RootStyleError):
    """A root stylesheet has already been installed."""

    def __init__(self, message: str = "Root style is already initialized") -> None:
        super().__init__(message)


class AutoapplyError(RootStyleError):
    """Automatic application could not be attached to the lifecycle hook."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
