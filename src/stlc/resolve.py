"""Name resolution: named syntax trees to de Bruijn-indexed terms."""

from __future__ import annotations

import logging

from .ast import Abs, App, FalseTerm, If, Term, TrueTerm, Var, Zero, wrap_succ
from .context import Ctx
from .errors import UnboundVariable
from .syntax import (
    SAbs,
    SApp,
    SFalse,
    SIf,
    SSucc,
    STrue,
    SurfaceTerm,
    SVar,
    SZero,
)

logger = logging.getLogger(__name__)

type NameCtx = Ctx[str]


def resolve(term: SurfaceTerm, names: NameCtx | None = None) -> Term:
    """Replace variable names in ``term`` by de Bruijn indices.

    ``names`` holds the binders already in scope, innermost first. A new
    binder always takes index 0, even when an outer binder has the same
    name; the outer one is simply no longer reachable by name.

    Raises:
        UnboundVariable: A name is not bound by ``names`` or by an enclosing
            abstraction.
    """

    names = names or Ctx()
    match term:
        case STrue():
            return TrueTerm()
        case SFalse():
            return FalseTerm()
        case SZero():
            return Zero()
        case SSucc():
            count = 0
            core = term
            while isinstance(core, SSucc):
                count += 1
                core = core.n
            return wrap_succ(count, resolve(core, names))
        case SVar(name):
            idx = names.index_of(name)
            if idx is None:
                logger.debug("unbound variable %r in %s", name, names)
                raise UnboundVariable(name, term.span)
            return Var(idx)
        case SAbs(name, ty, body):
            return Abs(ty, resolve(body, names.push(name)))
        case SApp(fn, arg):
            return App(resolve(fn, names), resolve(arg, names))
        case SIf(c, t, e):
            return If(resolve(c, names), resolve(t, names), resolve(e, names))

    raise TypeError(f"Unexpected surface term in resolve: {term!r}")


def resolve_in(term: SurfaceTerm, *names: str) -> Term:
    """Resolve ``term`` under free ``names`` ordered outermost → innermost."""

    return resolve(term, Ctx.of(*names))


__all__ = ["NameCtx", "resolve", "resolve_in"]
