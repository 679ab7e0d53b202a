"""Stylesheet model: Declaration, Rule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule body."""

    property: str  # original case, e.g. "background-image"
    value: str  # serialized and stripped, e.g. "url(x.png)"


@dataclass(frozen=True)
class Rule:
    """One top-level stylesheet construct.

    ``type`` is ``"rule"`` for a qualified rule, otherwise the lowercased
    at-keyword (``"media"``, ``"font-face"``, ...).  At-rules have no
    selectors; ``selectors`` and ``declarations`` may therefore be ``None``,
    which is distinct from an empty tuple.
    """

    type: str
    selectors: tuple[str, ...] | None = None
    declarations: tuple[Declaration, ...] | None = None


@dataclass(frozen=True)
class Stylesheet:
    """A parsed stylesheet.

    ``rules`` is ``None`` when the source holds no top-level constructs at
    all (empty, whitespace or comments only).
    """

    rules: tuple[Rule, ...] | None
    source: str | None = None
