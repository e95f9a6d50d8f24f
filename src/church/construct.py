"""Constructors for Church numerals."""

from __future__ import annotations

from church.numeral import Church, Numeral, Succ, T, compose, identity


def zero() -> Numeral[T]:
    return Church(lambda f: identity)


def one() -> Numeral[T]:
    return Church(lambda f: f)


def two() -> Numeral[T]:
    return Church(lambda f: compose(f, f))


def three() -> Numeral[T]:
    return Church(lambda f: compose(f, f, f))


def succ(n: Numeral[T]) -> Numeral[T]:
    """
    succ n = λf. λx. f (n f x)

    ``n`` is shared by the result, not copied.
    """

    return Succ(n)


def from_int(k: int) -> Numeral[T]:
    """Return the numeral for ``k`` by applying ``succ`` to ``zero`` ``k`` times."""

    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError(f"Expected a non-negative int, got {type(k).__name__}")
    if k < 0:
        raise ValueError("Church numerals must be non-negative")
    numeral: Numeral[T] = zero()
    for _ in range(k):
        numeral = succ(numeral)
    return numeral


def church(k: int) -> Numeral[T]:
    """Literal builder; ``church(5)`` is ``from_int(5)``."""
    return from_int(k)
