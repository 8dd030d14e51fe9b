"""De Bruijn-indexed terms of the simply typed lambda calculus.

Terms are frozen dataclasses; every operation over them (shifting,
substitution, evaluation) rebuilds nodes instead of mutating them, so a
subterm can be shared freely between the input and output of a
transformation.
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import Type


@dataclass(frozen=True)
class TrueTerm:
    """The boolean constant ``true``."""


@dataclass(frozen=True)
class FalseTerm:
    """The boolean constant ``false``."""


@dataclass(frozen=True)
class Zero:
    """The natural number ``0``."""


@dataclass(frozen=True)
class Succ:
    """Successor of a numeric term."""

    n: Term


@dataclass(frozen=True)
class Var:
    """De Bruijn variable pointing to the binder at ``k``.

    Args:
        k: Zero-based index counting binders outward from the use site.
           ``0`` refers to the innermost enclosing ``Abs``, ``1`` to the next, etc.
    """

    k: int

    def __post_init__(self) -> None:
        if self.k < 0:
            raise ValueError("De Bruijn indices must be non-negative")


@dataclass(frozen=True)
class Abs:
    """Lambda abstraction binding exactly one variable.

    Args:
        ty: Type annotation of the bound parameter.
        body: Term in which the parameter is ``Var(0)``.
    """

    ty: Type
    body: Term


@dataclass(frozen=True)
class App:
    """Function application.

    Args:
        func: Term expected to reduce to an abstraction.
        arg: Argument term supplied to ``func``.
    """

    func: Term
    arg: Term


@dataclass(frozen=True)
class If:
    """Conditional ``if cond then then else else_``."""

    cond: Term
    then: Term
    else_: Term


type Term = TrueTerm | FalseTerm | Zero | Succ | Var | Abs | App | If


def numeral(n: int) -> Term:
    """Return the unary numeral ``Succ^n(Zero)``."""

    if n < 0:
        raise ValueError("Numerals must be non-negative")
    return wrap_succ(n, Zero())


def split_succ(term: Term) -> tuple[int, Term]:
    """Strip the ``Succ`` prefix of ``term``.

    Returns the number of ``Succ`` nodes removed and the first non-``Succ``
    subterm. Numerals are as deep as their value, so traversals peel the
    prefix with this loop and handle the core once.
    """

    count = 0
    while isinstance(term, Succ):
        count += 1
        term = term.n
    return count, term


def wrap_succ(count: int, term: Term) -> Term:
    """Apply ``Succ`` to ``term`` ``count`` times."""

    for _ in range(count):
        term = Succ(term)
    return term


def as_int(term: Term) -> int | None:
    """Read back a numeral, or ``None`` when ``term`` is not ``Succ^n(Zero)``."""

    count, core = split_succ(term)
    return count if isinstance(core, Zero) else None


__all__ = [
    "Term",
    "TrueTerm",
    "FalseTerm",
    "Zero",
    "Succ",
    "Var",
    "Abs",
    "App",
    "If",
    "numeral",
    "split_succ",
    "wrap_succ",
    "as_int",
]
