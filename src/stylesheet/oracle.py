"""Type oracle: subtype and capability-conformance queries over classes."""

from __future__ import annotations

from typing import Protocol


class TypeOracle(Protocol):
    """Answers the type questions the specificity engine needs.

    Implementations must describe a strict, acyclic subtype relation and a
    reflexive, transitive capability-conformance relation.
    """

    def type_equals(self, a: type, b: type) -> bool: ...

    def is_subtype(self, a: type, b: type) -> bool:
        """True if *a* is a strict subtype of *b*."""
        ...

    def conforms(self, instance_type: type, capability: type) -> bool:
        """True if instances of *instance_type* carry *capability*."""
        ...

    def capability_conforms_to(self, cap_a: type, cap_b: type) -> bool:
        """True if *cap_a* implies *cap_b* (reflexive)."""
        ...


class RuntimeTypeOracle:
    """Default oracle backed by Python's own class hierarchy.

    Markers are ordinary classes mixed into the styled classes (or ABCs with
    registered virtual subclasses), so most queries reduce to ``issubclass``.
    ``typing.Protocol`` markers are matched nominally: a class carries one
    only if it lists the protocol among its bases.
    """

    def type_equals(self, a: type, b: type) -> bool:
        return a is b

    def is_subtype(self, a: type, b: type) -> bool:
        return a is not b and issubclass(a, b)

    def conforms(self, instance_type: type, capability: type) -> bool:
        return _carries(instance_type, capability)

    def capability_conforms_to(self, cap_a: type, cap_b: type) -> bool:
        return _carries(cap_a, cap_b)


def _carries(cls: type, capability: type) -> bool:
    # issubclass raises for plain protocols and matches runtime-checkable
    # ones structurally, which makes an empty marker protocol match anything.
    if getattr(capability, "_is_protocol", False):
        return capability in cls.__mro__
    return issubclass(cls, capability)


DEFAULT_ORACLE: TypeOracle = RuntimeTypeOracle()
