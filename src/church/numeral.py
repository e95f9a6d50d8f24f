"""Representation of Church numerals as callables over endofunctions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Endo = Callable[[T], T]


def identity(x: T) -> T:
    return x


@dataclass(frozen=True, eq=False, repr=False)
class Composition(Generic[T]):
    """Endofunction that applies ``stages`` left to right.

    Running a composition is a loop, so ``f^n(x)`` does not nest ``n``
    Python frames.
    """

    stages: tuple[Endo[T], ...]

    def __call__(self, x: T) -> T:
        for stage in self.stages:
            x = stage(x)
        return x

    def __repr__(self) -> str:
        return f"Composition(<{len(self.stages)} stages>)"


def compose(*fs: Endo[T]) -> Endo[T]:
    """Compose endofunctions left to right: ``compose(f, g)(x) == g(f(x))``.

    Stages of ``Composition`` arguments are spliced in and ``identity``
    stages are dropped.
    """

    stages: list[Endo[T]] = []
    for f in fs:
        if isinstance(f, Composition):
            stages.extend(f.stages)
        elif f is not identity:
            stages.append(f)
    if not stages:
        return identity
    if len(stages) == 1:
        return stages[0]
    return Composition(tuple(stages))


@dataclass(frozen=True, eq=False, repr=False)
class Numeral(Generic[T]):
    """A natural number ``n`` encoded as ``f ↦ f^n``.

    Calling a numeral with an endofunction ``f`` returns ``f`` composed with
    itself ``n`` times (``f^0`` is the identity). A numeral carries no
    integer: two numerals are the same number exactly when they behave the
    same for every ``f``. Numerals are immutable and compare by identity.

    A numeral is itself an endofunction over ``Endo[T]``, which is what lets
    ``Numeral[Endo[T]]`` iterate another numeral.
    """

    def __call__(self, f: Endo[T]) -> Endo[T]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} numeral>"


@dataclass(frozen=True, eq=False, repr=False)
class Church(Numeral[T]):
    """Numeral backed by an arbitrary higher-order function."""

    body: Callable[[Endo[T]], Endo[T]]

    def __call__(self, f: Endo[T]) -> Endo[T]:
        return self.body(f)


@dataclass(frozen=True, eq=False, repr=False)
class Succ(Numeral[T]):
    """One more application of ``f`` after ``pred(f)``."""

    pred: Numeral[T]

    def __call__(self, f: Endo[T]) -> Endo[T]:
        # Unwind successor chains with a loop; the innermost numeral runs once.
        node: Numeral[T] = self
        wrappers = 0
        while isinstance(node, Succ):
            node = node.pred
            wrappers += 1
        return compose(node(f), Composition((f,) * wrappers))
