"""Arithmetic on Church numerals, by composition and application only."""

from __future__ import annotations

from church.numeral import Church, Endo, Numeral, T, compose


def add(n: Numeral[T], m: Numeral[T]) -> Numeral[T]:
    """
    add n m = λf. λx. m f (n f x)

    ``f^n`` and ``f^m`` are both built from ``f``; ``n`` runs first.
    """

    def body(f: Endo[T]) -> Endo[T]:
        f_n = n(f)
        f_m = m(f)
        return compose(f_n, f_m)

    return Church(body)


def mult(n: Numeral[T], m: Numeral[T]) -> Numeral[T]:
    """
    mult n m = λf. m (n f)

    Applying "apply ``f`` n times" m times.
    """

    def body(f: Endo[T]) -> Endo[T]:
        return m(n(f))

    return Church(body)


def exp(n: Numeral[T], m: Numeral[Endo[T]]) -> Numeral[T]:
    """
    exp n m = λf. m n f

    The exponent iterates over ``Endo[T]``: ``n`` is the endofunction
    ``f ↦ f^n`` that ``m`` applies m times, giving ``f^(n^m)``.
    """

    def body(f: Endo[T]) -> Endo[T]:
        return m(n)(f)

    return Church(body)
