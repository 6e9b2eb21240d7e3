"""CLI commands: stylesheet inspect / explain -- display resolved style order."""

from __future__ import annotations

import importlib
import sys
from typing import Any

import click

from stylesheet.errors import StyleSheetError
from stylesheet.sheet import StyleSheet


class LoadError(Exception):
    """Raised when a ``module:attribute`` reference cannot be resolved."""


def load_object(ref: str) -> Any:
    """Import ``package.module:attr.path`` and return the referenced object."""
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise LoadError(f"Expected MODULE:ATTRIBUTE, got {ref!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise LoadError(f"Cannot import module {module_name!r}: {exc}") from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise LoadError(f"{module_name!r} has no attribute {attr_path!r}") from exc
    return obj


def _load_sheet(ref: str) -> StyleSheet:
    """Load a StyleSheet, or build one from a loaded list of styles."""
    obj = load_object(ref)
    if isinstance(obj, StyleSheet):
        return obj
    if isinstance(obj, (list, tuple)):
        return StyleSheet.build(obj)
    raise LoadError(f"{ref!r} is neither a StyleSheet nor a list of styles")


def _load_class(ref: str) -> type:
    obj = load_object(ref)
    if not isinstance(obj, type):
        raise LoadError(f"{ref!r} is not a class")
    return obj


def _fail(exc: Exception) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.command()
@click.argument("sheet_ref", metavar="MODULE:ATTR")
def inspect(sheet_ref: str) -> None:
    """Load a stylesheet and display its rules in application order.

    MODULE:ATTR names either a StyleSheet or a list of styles, which is built
    into a StyleSheet (reporting redundant styles).
    """
    try:
        sheet = _load_sheet(sheet_ref)
    except (LoadError, StyleSheetError) as exc:
        _fail(exc)
        return

    click.echo(f"StyleSheet: {sheet_ref}")
    click.echo(f"Styles: {len(sheet)}")
    click.echo()
    for position, s in enumerate(sheet, start=1):
        click.echo(f"  {position:>3}. {s.key}")


@click.command()
@click.argument("sheet_ref", metavar="MODULE:ATTR")
@click.argument("class_ref", metavar="MODULE:CLASS")
@click.option("--marker", "marker_ref", default=None, metavar="MODULE:CLASS",
              help="Only rules tagged with exactly this marker.")
def explain(sheet_ref: str, class_ref: str, marker_ref: str | None) -> None:
    """Show which styles fire for an instance of a class, in order.

    The last style listed wins for any attribute that several styles set.
    """
    try:
        sheet = _load_sheet(sheet_ref)
        cls = _load_class(class_ref)
        marker = _load_class(marker_ref) if marker_ref else None
    except (LoadError, StyleSheetError) as exc:
        _fail(exc)
        return

    matched = sheet.resolve(cls, marker)
    label = cls.__qualname__
    if marker is not None:
        label += f" (marker {marker.__qualname__})"
    if not matched:
        click.echo(f"No styles apply to {label}")
        return

    click.echo(f"Styles applied to {label}:")
    for position, s in enumerate(matched, start=1):
        click.echo(f"  {position:>3}. {s.key}")
