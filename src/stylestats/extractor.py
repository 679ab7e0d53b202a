"""Statistics Extractor: fold a parsed stylesheet into a StatRecord."""

from __future__ import annotations

import dataclasses
import re
from typing import Callable, Iterable, TypeVar

from stylestats.model.record import StatRecord
from stylestats.stylesheet.model import Declaration, Rule, Stylesheet

T = TypeVar("T")

# A rule may match both patterns; they are checked independently.
RE_BACKGROUND_SELECTOR = re.compile(r"color-\d-background", re.IGNORECASE | re.ASCII)
RE_COLOR_SELECTOR = re.compile(r"color-\d[^-]", re.IGNORECASE | re.ASCII)


def _any(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> bool:
    """``any`` that treats a missing sequence as empty."""
    if items is None:
        return False
    return any(predicate(item) for item in items)


def is_background_selector(selector: str) -> bool:
    return RE_BACKGROUND_SELECTOR.search(selector) is not None


def is_color_selector(selector: str) -> bool:
    return RE_COLOR_SELECTOR.search(selector) is not None


def is_background_image_declaration(declaration: Declaration) -> bool:
    """True for ``background*: url(...)`` declarations (property is case-sensitive)."""
    return declaration.property.startswith("background") and declaration.value.startswith(
        "url"
    )


def contains_background_selectors(rule: Rule) -> bool:
    return _any(rule.selectors, is_background_selector)


def contains_color_selectors(rule: Rule) -> bool:
    return _any(rule.selectors, is_color_selector)


def contains_background_image_declarations(rule: Rule) -> bool:
    return _any(rule.declarations, is_background_image_declaration)


def get_statistics(initial: StatRecord, stylesheet: Stylesheet) -> StatRecord:
    """Count matching rules of ``stylesheet`` on top of ``initial``.

    A stylesheet without rules only sets ``emptyStylesheet``; every other
    field is carried over from ``initial`` unchanged.
    """
    if not stylesheet.rules:
        return dataclasses.replace(initial, emptyStylesheet=1)

    background = initial.backgroundSelectors
    color = initial.colorSelectors
    overridden = initial.backgroundIsOverriddenWithImage
    for rule in stylesheet.rules:
        if contains_background_selectors(rule):
            background += 1
            if contains_background_image_declarations(rule):
                overridden += 1
        if contains_color_selectors(rule):
            color += 1

    return dataclasses.replace(
        initial,
        backgroundSelectors=background,
        colorSelectors=color,
        backgroundIsOverriddenWithImage=overridden,
    )
