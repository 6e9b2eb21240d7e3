"""Style rule model: a (target, marker, body) triple and its identity key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from stylesheet.errors import InvalidStyleError
from stylesheet.oracle import DEFAULT_ORACLE, TypeOracle

__all__ = ["Style", "StyleKey", "style"]

Body = Callable[[Any], Any]


def _type_name(cls: type) -> str:
    return getattr(cls, "__qualname__", repr(cls))


@dataclass(frozen=True)
class StyleKey:
    """Identity of a style rule, used to detect redundant rules.

    ``StyleKey(Button, None)`` and ``StyleKey(Button, Primary)`` are distinct.
    """

    target: type
    marker: type | None = None

    def __str__(self) -> str:
        if self.marker is None:
            return _type_name(self.target)
        return f"{_type_name(self.target)}[{_type_name(self.marker)}]"


@dataclass(frozen=True)
class Style:
    """A single style rule.

    Attributes:
        target: Class whose instances this rule mutates.
        marker: Optional capability class; the rule then only applies to
            instances whose class conforms to it.
        body: Callable invoked with the instance when the rule fires.
    """

    target: type
    marker: type | None
    body: Body = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.target, type):
            raise InvalidStyleError(f"Style target must be a class, got {self.target!r}")
        if self.marker is not None and not isinstance(self.marker, type):
            raise InvalidStyleError(f"Style marker must be a class, got {self.marker!r}")
        if not callable(self.body):
            raise InvalidStyleError(f"Style body must be callable, got {self.body!r}")

    @classmethod
    def build(cls, target: type, marker: type | None = None, body: Body | None = None) -> Style:
        """Create a rule for *target*, optionally gated by *marker*."""
        if body is None:
            raise InvalidStyleError(f"Style for {_type_name(target)} has no body")
        return cls(target=target, marker=marker, body=body)

    @property
    def key(self) -> StyleKey:
        return StyleKey(self.target, self.marker)

    def matches(
        self,
        cls: type,
        marker: type | None = None,
        oracle: TypeOracle = DEFAULT_ORACLE,
    ) -> bool:
        """Return True if an instance of *cls* would be styled by this rule.

        With a *marker* override only rules carrying exactly that marker
        match, whatever capabilities *cls* actually has.
        """
        if not (oracle.type_equals(cls, self.target) or oracle.is_subtype(cls, self.target)):
            return False
        if marker is not None:
            return self.marker is not None and oracle.type_equals(marker, self.marker)
        if self.marker is None:
            return True
        return oracle.conforms(cls, self.marker)

    def try_apply(
        self,
        instance: Any,
        marker: type | None = None,
        oracle: TypeOracle = DEFAULT_ORACLE,
    ) -> bool:
        """Invoke the body on *instance* if the rule matches it.

        Mismatches are silent. Returns whether the body ran.
        """
        if not self.matches(type(instance), marker, oracle):
            return False
        self.body(instance)
        return True


def style(target: type, marker: type | None = None) -> Callable[[Body], Style]:
    """Decorator form of :meth:`Style.build`.

    Example::

        @style(Button, Primary)
        def primary_button(button):
            button.color = "blue"
    """

    def decorator(body: Body) -> Style:
        return Style.build(target, marker, body)

    return decorator
