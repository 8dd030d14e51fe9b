"""Property-based checks of type soundness and index bookkeeping.

Terms are generated type-directed, so every generated term is well typed in
the context it was generated for:

  * progress: a closed well-typed term is a value or takes a step,
  * preservation: every step keeps the type,
  * shifting up and back down is the identity,
  * contracting a redex agrees with the lift/substitute/lower formulation.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from stlc.ast import Abs, App, FalseTerm, If, Succ, Term, TrueTerm, Var, Zero
from stlc.context import Ctx
from stlc.debruijn import beta, free_indices, shift, subst
from stlc.eval import evaluate, is_value, reduction_sequence, step
from stlc.types import Arrow, Boolean, Number, Type
from stlc.typing import type_of

SETTINGS = settings(
    max_examples=200, deadline=None, suppress_health_check=[HealthCheck.too_slow]
)

types = st.recursive(
    st.sampled_from([Boolean(), Number()]),
    lambda inner: st.builds(Arrow, inner, inner),
    max_leaves=3,
)


@st.composite
def typed_terms(
    draw: st.DrawFn, ty: Type, ctx: tuple[Type, ...] = (), depth: int = 3
) -> Term:
    """Draw a term of type ``ty`` under ``ctx`` (innermost binder first)."""

    candidates = [i for i, bound in enumerate(ctx) if bound == ty]
    kinds = ["intro"]
    if candidates:
        kinds.append("var")
    if depth > 0:
        kinds += ["if", "app"]
    kind = draw(st.sampled_from(kinds))

    if kind == "var":
        return Var(draw(st.sampled_from(candidates)))
    if kind == "if":
        return If(
            draw(typed_terms(Boolean(), ctx, depth - 1)),
            draw(typed_terms(ty, ctx, depth - 1)),
            draw(typed_terms(ty, ctx, depth - 1)),
        )
    if kind == "app":
        arg_ty = draw(types)
        return App(
            draw(typed_terms(Arrow(arg_ty, ty), ctx, depth - 1)),
            draw(typed_terms(arg_ty, ctx, depth - 1)),
        )

    match ty:
        case Boolean():
            return draw(st.sampled_from([TrueTerm(), FalseTerm()]))
        case Number():
            if depth > 0 and draw(st.booleans()):
                return Succ(draw(typed_terms(Number(), ctx, depth - 1)))
            return Zero()
        case Arrow(dom, cod):
            # The codomain is smaller than ``ty``, so keeping ``depth`` terminates.
            return Abs(dom, draw(typed_terms(cod, (dom, *ctx), depth)))

    raise TypeError(f"Unexpected type {ty!r}")


@st.composite
def closed_programs(draw: st.DrawFn) -> tuple[Term, Type]:
    ty = draw(types)
    return draw(typed_terms(ty)), ty


@st.composite
def open_terms(draw: st.DrawFn) -> tuple[Term, Ctx[Type]]:
    ctx = tuple(draw(st.lists(types, min_size=1, max_size=3)))
    term = draw(typed_terms(draw(types), ctx))
    return term, Ctx(ctx)


@st.composite
def redexes(draw: st.DrawFn) -> tuple[Type, Term, Term]:
    """A body typed under one binder of type ``param`` and a closed value of that type."""

    param = draw(types)
    body = draw(typed_terms(draw(types), (param,)))
    value = evaluate(draw(typed_terms(param)))
    return param, body, value


@SETTINGS
@given(closed_programs())
def test_generated_terms_are_well_typed(program: tuple[Term, Type]) -> None:
    term, ty = program
    assert type_of(term) == ty


@SETTINGS
@given(closed_programs())
def test_progress(program: tuple[Term, Type]) -> None:
    term, _ = program
    for current in reduction_sequence(term):
        if not is_value(current):
            step(current)


@SETTINGS
@given(closed_programs())
def test_preservation(program: tuple[Term, Type]) -> None:
    term, ty = program
    for current in reduction_sequence(term):
        assert type_of(current) == ty
    assert is_value(evaluate(term))


@SETTINGS
@given(open_terms(), st.integers(min_value=0, max_value=3))
def test_shift_round_trip(sample: tuple[Term, Ctx[Type]], cutoff: int) -> None:
    term, _ = sample
    assert shift(shift(term, 1), -1) == term
    assert shift(shift(term, 1, cutoff), -1, cutoff) == term


@SETTINGS
@given(open_terms())
def test_weakening_keeps_type(sample: tuple[Term, Ctx[Type]]) -> None:
    term, ctx = sample
    ty = type_of(term, ctx)
    # Insert an unused binder right below the innermost one.
    weakened = Ctx((ctx[0], Boolean(), *ctx.entries[1:]))
    assert type_of(shift(term, 1, cutoff=1), weakened) == ty
    assert max(free_indices(shift(term, 1, cutoff=1)), default=0) <= len(ctx)


@SETTINGS
@given(redexes())
def test_beta_agrees_with_lift_substitute_lower(redex: tuple[Type, Term, Term]) -> None:
    _, body, value = redex
    assert beta(body, value) == shift(subst(body, shift(value, 1), 0), -1)


@SETTINGS
@given(redexes())
def test_beta_preserves_body_type(redex: tuple[Type, Term, Term]) -> None:
    param, body, value = redex
    body_ty = type_of(body, Ctx.of(param))
    assert type_of(beta(body, value)) == body_ty
    assert type_of(App(Abs(param, body), value)) == body_ty
