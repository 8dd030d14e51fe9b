"""Persistent binder contexts shared by scope resolution and type checking."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True)
class Ctx[T](Sequence[T]):
    """
    Ordered binder context indexed by de Bruijn index.

    Representation:
        Entries are stored most-recent-first: index 0 is the innermost binder,
        index 1 the next outer binder, and so on. The resolver keeps name
        hints (``Ctx[str]``), the type checker keeps parameter types
        (``Ctx[Type]``).

    Extension discipline:
        ``push`` and ``pop`` return new contexts and never touch ``self``.
        A caller that extends the context for a recursive call simply keeps
        using its own value afterwards, so the binding is released on every
        exit path, exceptions included.
    """

    entries: tuple[T, ...] = ()

    @staticmethod
    def empty() -> Ctx[T]:
        return Ctx()

    @staticmethod
    def of(*entries: T) -> Ctx[T]:
        """Build a context from entries ordered outermost → innermost.

        ``Ctx.of(a, b)`` is ``Ctx.empty().push(a).push(b)``: ``b`` ends up at
        index 0, mirroring the order binders appear in source text.
        """
        return Ctx(tuple(reversed(entries)))

    def __len__(self) -> int:
        return len(self.entries)

    @overload
    def __getitem__(self, i: int, /) -> T: ...
    @overload
    def __getitem__(self, s: slice, /) -> Sequence[T]: ...
    def __getitem__(self, idx: int | slice) -> T | Sequence[T]:
        return self.entries[idx]

    def __iter__(self) -> Iterator[T]:
        return iter(self.entries)

    def push(self, entry: T) -> Ctx[T]:
        """Return a context with ``entry`` bound at index 0."""

        return Ctx((entry, *self.entries))

    def pop(self) -> Ctx[T]:
        """Return the context without its innermost binding."""

        if not self.entries:
            raise IndexError("pop from empty context")
        return Ctx(self.entries[1:])

    def find(self, pred: Callable[[T], bool]) -> int | None:
        """Index of the innermost entry satisfying ``pred``, or ``None``."""

        for i, entry in enumerate(self.entries):
            if pred(entry):
                return i
        return None

    def index_of(self, entry: T) -> int | None:
        return self.find(lambda other: other == entry)

    def __str__(self) -> str:
        if len(self.entries) < 2:
            return f"Ctx{self.entries}"
        return "Ctx(\n" + "".join(f"  #{i}: {e}\n" for i, e in enumerate(self)) + ")"


__all__ = ["Ctx"]
