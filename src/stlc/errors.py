"""Error types raised by the resolver, the type checker and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass

from .ast import Term
from .common.span import Span
from .types import Type


@dataclass
class UnboundVariable(Exception):
    """A named variable with no enclosing binder of the same name."""

    name: str
    span: Span | None = None

    def __str__(self) -> str:
        if self.span is None:
            return f"Unbound variable {self.name!r}"
        return f"Unbound variable {self.name!r} @ {self.span}"


class TypingError(TypeError):
    """Base class for ill-typed terms."""


@dataclass
class TypeMismatch(TypingError):
    expected: Type
    found: Type

    def __str__(self) -> str:
        return f"Type mismatch: expected {self.expected}, found {self.found}"


@dataclass
class ArrowExpected(TypingError):
    """The head of an application does not have a function type."""

    found: Type

    def __str__(self) -> str:
        return f"Expected a function type, found {self.found}"


@dataclass
class NoRuleApplies(Exception):
    """``step`` was given a value or a stuck term.

    Callers tell the two apart with ``is_value``.
    """

    term: Term

    def __str__(self) -> str:
        return f"No evaluation rule applies to {self.term!r}"


class EvaluationError(Exception):
    """Base class for failures of a full evaluation run."""


@dataclass
class StuckTermError(EvaluationError):
    """Evaluation stopped on a term that is neither reducible nor a value."""

    term: Term

    def __str__(self) -> str:
        return f"Evaluation is stuck at {self.term!r}"


@dataclass
class StepLimitExceeded(EvaluationError):
    limit: int
    term: Term

    def __str__(self) -> str:
        return f"Evaluation did not finish within {self.limit} steps"


@dataclass
class EvaluationInterrupted(EvaluationError):
    """The caller's interrupt callable asked evaluation to stop."""

    term: Term
    steps: int

    def __str__(self) -> str:
        return f"Evaluation interrupted after {self.steps} steps"


__all__ = [
    "UnboundVariable",
    "TypingError",
    "TypeMismatch",
    "ArrowExpected",
    "NoRuleApplies",
    "EvaluationError",
    "StuckTermError",
    "StepLimitExceeded",
    "EvaluationInterrupted",
]
