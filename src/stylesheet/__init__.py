"""Specificity-ordered style rules over the Python class hierarchy."""

from stylesheet.config import StyleConfig
from stylesheet.errors import (
    AlreadyInitializedError,
    AutoapplyError,
    DuplicateStyleError,
    InvalidStyleError,
    NotOnMainThreadError,
    RootStyleError,
    SpecificityCycleError,
    StyleSheetError,
)
from stylesheet.events import EventBus, StyleApplied, ViewReady
from stylesheet.oracle import RuntimeTypeOracle, TypeOracle
from stylesheet.root import RootStyle, root_style
from stylesheet.sheet import StyleSheet
from stylesheet.specificity import is_less_specific, sort_styles
from stylesheet.style import Style, StyleKey, style

__version__ = "0.3.0"

__all__ = [
    # rules
    "Style",
    "StyleKey",
    "style",
    # ordering
    "is_less_specific",
    "sort_styles",
    "StyleSheet",
    # oracle
    "TypeOracle",
    "RuntimeTypeOracle",
    # root style
    "RootStyle",
    "root_style",
    "StyleConfig",
    # events
    "EventBus",
    "ViewReady",
    "StyleApplied",
    # errors
    "StyleSheetError",
    "DuplicateStyleError",
    "SpecificityCycleError",
    "InvalidStyleError",
    "RootStyleError",
    "NotOnMainThreadError",
    "AlreadyInitializedError",
    "AutoapplyError",
]
