"""Type inference and checking for the simply typed calculus."""

from __future__ import annotations

from .ast import Abs, App, FalseTerm, If, Succ, Term, TrueTerm, Var, Zero, split_succ
from .context import Ctx
from .errors import ArrowExpected, TypeMismatch
from .types import Arrow, Boolean, Number, Type


def _expect(ty: Type, expected: Type) -> None:
    if ty != expected:
        raise TypeMismatch(expected=expected, found=ty)


def type_of(term: Term, ctx: Ctx[Type] | None = None) -> Type:
    """Infer the type of ``term`` under the De Bruijn context ``ctx``.

    Raises:
        TypeMismatch: A subterm has the wrong type.
        ArrowExpected: An application head is not a function.
        IndexError: A variable points past the end of ``ctx``; the resolver
            never produces such terms.
    """

    ctx = ctx or Ctx()
    match term:
        case TrueTerm() | FalseTerm():
            return Boolean()
        case Zero():
            return Number()
        case Succ():
            # Every layer of a Succ spine needs Nat, so checking the core suffices.
            type_check(split_succ(term)[1], Number(), ctx)
            return Number()
        case Var(i):
            if i < len(ctx):
                return ctx[i]
            raise IndexError(f"Unbound variable {i} in context of length {len(ctx)}")
        case Abs(arg_ty, body):
            return Arrow(arg_ty, type_of(body, ctx.push(arg_ty)))
        case App(f, a):
            f_ty = type_of(f, ctx)
            if not isinstance(f_ty, Arrow):
                raise ArrowExpected(found=f_ty)
            type_check(a, f_ty.domain, ctx)
            return f_ty.codomain
        case If(c, t, e):
            type_check(c, Boolean(), ctx)
            then_ty = type_of(t, ctx)
            type_check(e, then_ty, ctx)
            return then_ty

    raise TypeError(f"Unexpected term in type_of: {term!r}")


def type_check(term: Term, ty: Type, ctx: Ctx[Type] | None = None) -> None:
    """Check that ``term`` has type ``ty`` under ``ctx``, raising on mismatches."""

    _expect(type_of(term, ctx), ty)


__all__ = ["type_of", "type_check"]
