"""Root style registry: the application-wide stylesheet and its lifecycle hook.

The engine itself keeps no per-object state. This module owns the
"already styled" bookkeeping so that the root stylesheet is applied at most
once per object, however many lifecycle events the host emits for it.
"""

from __future__ import annotations

import logging
import threading
import weakref
from typing import Any, TypeVar

from stylesheet.config import StyleConfig
from stylesheet.errors import AlreadyInitializedError, AutoapplyError, NotOnMainThreadError
from stylesheet.events import EventBus, StyleApplied, ViewReady
from stylesheet.sheet import StyleSheet

__all__ = ["RootStyle", "root_style"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _AppliedSet:
    """Identity-keyed set of objects that have already been styled.

    Entries are weak references that drop out when the object is collected.
    Objects without weakref support are held strongly so that their id
    cannot be reused while the entry exists.
    """

    def __init__(self) -> None:
        self._entries: dict[int, Any] = {}

    def add(self, obj: Any) -> bool:
        """Record *obj*; return False if it was already recorded."""
        key = id(obj)
        if key in self._entries:
            return False
        try:
            self._entries[key] = weakref.ref(obj, lambda _, key=key: self._entries.pop(key, None))
        except TypeError:
            self._entries[key] = obj
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


class RootStyle:
    """Holds the root stylesheet and applies it to objects as they appear."""

    def __init__(self, config: StyleConfig | None = None) -> None:
        self.config = config or StyleConfig()
        self._style: StyleSheet | None = None
        self._bus: EventBus | None = None
        self._applied = _AppliedSet()
        self._lock = threading.Lock()

    @property
    def style(self) -> StyleSheet | None:
        return self._style

    def set(self, style: StyleSheet) -> None:
        """Install *style* as the root stylesheet."""
        self._safeguard()
        self._style = style
        logger.info("Root stylesheet installed with %d style(s)", len(style))

    def apply(self, obj: Any) -> bool:
        """Apply the root stylesheet to *obj* once; later calls do nothing.

        Returns True if the stylesheet was applied by this call.

        Objects are remembered through weak references. Objects that do not
        support weak references (``__slots__`` without ``__weakref__``) are
        kept alive by the registry until :meth:`reset`, so hosts styling many
        short-lived objects of that kind should add ``__weakref__`` to their
        slots or use ``StyleConfig(apply_once=False)``.
        """
        style = self._style
        if style is None:
            return False
        if self.config.apply_once:
            with self._lock:
                if not self._applied.add(obj):
                    return False
        fired = style.apply(obj)
        if self._bus is not None and self.config.emit_events:
            self._bus.emit(StyleApplied(obj=obj, fired=fired))
        return True

    def styled(self, obj: T, marker: type) -> T:
        """Apply only the root rules tagged with *marker* to *obj* and return it."""
        if self._style is not None:
            self._style.apply(obj, marker)
        return obj

    def autoapply(self, style: StyleSheet, bus: EventBus) -> None:
        """Install *style* and apply it to every object announced on *bus*."""
        subscribe = getattr(bus, "subscribe", None)
        if not callable(subscribe):
            raise AutoapplyError(f"Cannot attach to lifecycle hook {bus!r}")
        self.set(style)
        try:
            subscribe(ViewReady, self._on_view_ready)
        except Exception as exc:
            self._style = None
            raise AutoapplyError("Failed to subscribe to lifecycle events", cause=exc) from exc
        self._bus = bus
        logger.info("Root stylesheet attached to lifecycle events")

    def reset(self) -> None:
        """Forget the installed stylesheet, its hook and the applied objects."""
        unsubscribe = getattr(self._bus, "unsubscribe", None)
        if unsubscribe is not None:
            unsubscribe(ViewReady, self._on_view_ready)
        self._style = None
        self._bus = None
        with self._lock:
            self._applied.clear()

    def _on_view_ready(self, event: ViewReady) -> None:
        self.apply(event.obj)

    def _safeguard(self) -> None:
        if self.config.require_main_thread and threading.current_thread() is not threading.main_thread():
            raise NotOnMainThreadError()
        if self._style is not None:
            raise AlreadyInitializedError()


root_style = RootStyle()
