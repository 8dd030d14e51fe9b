"""Named-variable syntax trees handed to the resolver.

These mirror :mod:`stlc.ast` node for node, with string variable names in
place of de Bruijn indices. Every node may carry the source ``Span`` it was
parsed from; spans never take part in equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .common.span import Span
from .types import Type


@dataclass(frozen=True)
class SurfaceTerm:
    span: Span | None = field(default=None, kw_only=True, compare=False)


@dataclass(frozen=True)
class STrue(SurfaceTerm):
    pass


@dataclass(frozen=True)
class SFalse(SurfaceTerm):
    pass


@dataclass(frozen=True)
class SZero(SurfaceTerm):
    pass


@dataclass(frozen=True)
class SSucc(SurfaceTerm):
    n: SurfaceTerm


@dataclass(frozen=True)
class SVar(SurfaceTerm):
    name: str


@dataclass(frozen=True)
class SAbs(SurfaceTerm):
    """``lambda name: ty. body``"""

    name: str
    ty: Type
    body: SurfaceTerm


@dataclass(frozen=True)
class SApp(SurfaceTerm):
    fn: SurfaceTerm
    arg: SurfaceTerm


@dataclass(frozen=True)
class SIf(SurfaceTerm):
    cond: SurfaceTerm
    then: SurfaceTerm
    else_: SurfaceTerm


def snumeral(n: int, span: Span | None = None) -> SurfaceTerm:
    """Desugar a numeric literal into nested ``SSucc`` over ``SZero``."""

    term: SurfaceTerm = SZero(span=span)
    for _ in range(n):
        term = SSucc(term, span=span)
    return term


__all__ = [
    "SurfaceTerm",
    "STrue",
    "SFalse",
    "SZero",
    "SSucc",
    "SVar",
    "SAbs",
    "SApp",
    "SIf",
    "snumeral",
]
