"""Type algebra of the simply typed calculus: ``Bool``, ``Nat`` and arrows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Boolean:
    """The type of ``true`` and ``false``."""

    def __str__(self) -> str:
        return "Bool"


@dataclass(frozen=True)
class Number:
    """The type of unary naturals built from ``Zero`` and ``Succ``."""

    def __str__(self) -> str:
        return "Nat"


@dataclass(frozen=True)
class Arrow:
    """Function type ``domain -> codomain``.

    Args:
        domain: Type of the argument.
        codomain: Type of the result.
    """

    domain: Type
    codomain: Type

    def __str__(self) -> str:
        dom = f"({self.domain})" if isinstance(self.domain, Arrow) else str(self.domain)
        return f"{dom} -> {self.codomain}"


type Type = Boolean | Number | Arrow


def arrow(*tys: Type) -> Type:
    """Build a right-nested arrow chain.

    ``arrow(A, B, C)`` is ``Arrow(A, Arrow(B, C))``, matching the right
    associativity of ``->`` in source syntax. A single argument is returned
    unchanged.
    """
    if not tys:
        raise ValueError("arrow() needs at least one type")
    result = tys[-1]
    for ty in reversed(tys[:-1]):
        result = Arrow(ty, result)
    return result


__all__ = ["Type", "Boolean", "Number", "Arrow", "arrow"]
