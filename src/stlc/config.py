"""Evaluation settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EvalConfig:
    """Knobs for :func:`stlc.eval.evaluate`.

    Args:
        max_steps: Upper bound on the number of single steps taken by one
            evaluation run. ``None`` removes the bound; well-typed closed
            terms always terminate, so the bound only matters for terms that
            were never type checked.
    """

    max_steps: int | None = 100_000

    def __post_init__(self) -> None:
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError("max_steps must be non-negative")

    @staticmethod
    def unbounded() -> EvalConfig:
        return EvalConfig(max_steps=None)


DEFAULT_CONFIG = EvalConfig()


__all__ = ["EvalConfig", "DEFAULT_CONFIG"]
