"""Source-to-value pipeline: parse, resolve, type check, evaluate."""

from __future__ import annotations

from stlc.ast import Term
from stlc.config import EvalConfig
from stlc.eval import evaluate
from stlc.resolve import resolve_in
from stlc.surface.parse import parse_term
from stlc.types import Type
from stlc.typing import type_of


def load(source: str, *names: str) -> Term:
    """Parse ``source`` and resolve it under the free ``names`` (outermost first)."""

    return resolve_in(parse_term(source), *names)


def check(source: str) -> Type:
    """Return the type of the closed program ``source``."""

    return type_of(load(source))


def run(source: str, config: EvalConfig | None = None) -> tuple[Term, Type]:
    """Type check the closed program ``source``, then evaluate it.

    Returns:
        The resulting value together with the program's type.
    """

    term = load(source)
    ty = type_of(term)
    return evaluate(term, config), ty


__all__ = ["load", "check", "run"]
