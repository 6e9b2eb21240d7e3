"""Event types exchanged between the host and the root style registry."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ViewReady:
    """Emitted by the host when *obj* is ready to be styled."""

    obj: Any


@dataclass(frozen=True)
class StyleApplied:
    """Emitted after the root stylesheet styled *obj* for the first time."""

    obj: Any
    fired: int
