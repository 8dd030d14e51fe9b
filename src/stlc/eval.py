"""Call-by-value small-step evaluation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from .ast import Abs, App, FalseTerm, If, Succ, Term, TrueTerm, as_int, split_succ, wrap_succ
from .config import DEFAULT_CONFIG, EvalConfig
from .debruijn import beta
from .errors import (
    EvaluationInterrupted,
    NoRuleApplies,
    StepLimitExceeded,
    StuckTermError,
)

logger = logging.getLogger(__name__)


def is_numeric_value(term: Term) -> bool:
    """Return ``True`` for ``Zero`` under any number of ``Succ`` nodes."""

    return as_int(term) is not None


def is_value(term: Term) -> bool:
    match term:
        case TrueTerm() | FalseTerm() | Abs():
            return True
        case _:
            return is_numeric_value(term)


def step(term: Term) -> Term:
    """Perform one call-by-value reduction step, left to right.

    Raises:
        NoRuleApplies: ``term`` is a value or is stuck.
    """

    if is_value(term):
        raise NoRuleApplies(term)
    try:
        return _step(term)
    except NoRuleApplies:
        raise NoRuleApplies(term) from None


def _step(term: Term) -> Term:
    match term:
        case If(TrueTerm(), t, _):
            return t
        case If(FalseTerm(), _, e):
            return e
        case If(c, t, e):
            return If(_step(c), t, e)
        case App(Abs(_, body), arg) if is_value(arg):
            return beta(body, arg)
        case App(f, a) if is_value(f):
            return App(f, _step(a))
        case App(f, a):
            return App(_step(f), a)
        case Succ():
            count, core = split_succ(term)
            return wrap_succ(count, _step(core))

    raise NoRuleApplies(term)


def reduction_sequence(
    term: Term,
    config: EvalConfig | None = None,
    interrupt: Callable[[], bool] | None = None,
) -> Iterator[Term]:
    """Yield ``term`` and every term it steps to, until no rule applies.

    The sequence ends silently on values and on stuck terms alike; use
    :func:`evaluate` to have stuck terms reported.
    """

    config = config or DEFAULT_CONFIG
    steps = 0
    yield term
    while True:
        if interrupt is not None and interrupt():
            raise EvaluationInterrupted(term, steps)
        try:
            term = step(term)
        except NoRuleApplies:
            return
        steps += 1
        if config.max_steps is not None and steps > config.max_steps:
            logger.debug("step budget of %d exhausted", config.max_steps)
            raise StepLimitExceeded(config.max_steps, term)
        yield term


def evaluate(
    term: Term,
    config: EvalConfig | None = None,
    interrupt: Callable[[], bool] | None = None,
) -> Term:
    """Step ``term`` until no rule applies and return the resulting value.

    Args:
        term: Closed term to evaluate.
        config: Evaluation settings; defaults to ``DEFAULT_CONFIG``.
        interrupt: Polled before every step; returning ``True`` aborts the
            run with :class:`EvaluationInterrupted`.

    Raises:
        StuckTermError: The final term is not a value.
        StepLimitExceeded: More than ``config.max_steps`` steps were needed.
    """

    steps = -1
    for current in reduction_sequence(term, config, interrupt):
        term = current
        steps += 1
    if not is_value(term):
        logger.debug("evaluation stuck after %d steps: %r", steps, term)
        raise StuckTermError(term)
    logger.debug("evaluation finished after %d steps", steps)
    return term


__all__ = [
    "is_value",
    "is_numeric_value",
    "step",
    "reduction_sequence",
    "evaluate",
]
