"""Utilities for working with De Bruijn indices such as shifting and substitution."""

from __future__ import annotations

from .ast import Abs, App, FalseTerm, If, Succ, Term, TrueTerm, Var, Zero, split_succ, wrap_succ


def shift(term: Term, by: int, cutoff: int = 0) -> Term:
    """Shift free variables in ``term`` by ``by`` starting at ``cutoff``.

    Indices below ``cutoff`` refer to binders inside the region being
    shifted and stay put. ``cutoff`` grows by one under every ``Abs``.
    Shifting a free index below zero raises ``ValueError``.
    """

    match term:
        case Var(k):
            return Var(k + by) if k >= cutoff else term
        case Abs(ty, body):
            return Abs(ty, shift(body, by, cutoff + 1))
        case App(f, a):
            return App(shift(f, by, cutoff), shift(a, by, cutoff))
        case If(c, t, e):
            return If(shift(c, by, cutoff), shift(t, by, cutoff), shift(e, by, cutoff))
        case Succ():
            count, core = split_succ(term)
            return wrap_succ(count, shift(core, by, cutoff))
        case TrueTerm() | FalseTerm() | Zero():
            return term

    raise TypeError(f"Unexpected term in shift: {term!r}")


def subst(term: Term, sub: Term, j: int = 0) -> Term:
    """Substitute ``sub`` for ``Var(j)`` inside ``term``, and squash it.

    At depth ``c`` below the starting point the eliminated binder is
    ``Var(j + c)``; it is replaced by ``sub`` shifted up by ``c`` so that the
    free variables of ``sub`` keep pointing past the binders crossed on the
    way down. Indices above the eliminated binder drop by one to close the
    gap it leaves behind.

    A closed ``sub`` is unaffected by shifting and is shared between all
    occurrences instead of being rebuilt at each one.
    """

    return _subst(term, sub, j, 0, is_closed(sub))


def _subst(term: Term, sub: Term, j: int, depth: int, closed: bool) -> Term:
    match term:
        case Var(k):
            target = j + depth
            if k == target:
                return sub if closed else shift(sub, depth)
            elif k > target:
                return Var(k - 1)
            else:
                return term
        case Abs(ty, body):
            return Abs(ty, _subst(body, sub, j, depth + 1, closed))
        case App(f, a):
            return App(_subst(f, sub, j, depth, closed), _subst(a, sub, j, depth, closed))
        case If(c, t, e):
            return If(
                _subst(c, sub, j, depth, closed),
                _subst(t, sub, j, depth, closed),
                _subst(e, sub, j, depth, closed),
            )
        case Succ():
            count, core = split_succ(term)
            return wrap_succ(count, _subst(core, sub, j, depth, closed))
        case TrueTerm() | FalseTerm() | Zero():
            return term

    raise TypeError(f"Unexpected term in subst: {term!r}")


def beta(body: Term, arg: Term) -> Term:
    """Contract the redex ``App(Abs(_, body), arg)``.

    ``arg`` lives in the context outside the abstraction, which is exactly
    the context ``body`` is left in once its binder is gone, so a single
    squashing substitution at index 0 suffices.
    """

    return subst(body, arg, 0)


def free_indices(term: Term, depth: int = 0) -> frozenset[int]:
    """Return the free indices of ``term``, relative to its root."""

    match term:
        case Var(k):
            return frozenset({k - depth}) if k >= depth else frozenset()
        case Abs(_, body):
            return free_indices(body, depth + 1)
        case App(f, a):
            return free_indices(f, depth) | free_indices(a, depth)
        case If(c, t, e):
            return free_indices(c, depth) | free_indices(t, depth) | free_indices(e, depth)
        case Succ():
            return free_indices(split_succ(term)[1], depth)
        case TrueTerm() | FalseTerm() | Zero():
            return frozenset()

    raise TypeError(f"Unexpected term in free_indices: {term!r}")


def is_closed(term: Term, depth: int = 0) -> bool:
    """Return ``True`` when every ``Var`` in ``term`` is bound within ``depth`` binders."""

    return not free_indices(term, depth)


__all__ = ["shift", "subst", "beta", "free_indices", "is_closed"]
