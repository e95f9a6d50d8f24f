"""Decoding Church numerals back to Python integers."""

from __future__ import annotations

import logging
from typing import Callable

from church.errors import InvalidElementTypeError
from church.numeral import Numeral, T

logger = logging.getLogger(__name__)


def _default_seed(element_type: Callable[[], T]) -> T:
    try:
        return element_type()
    except Exception as exc:
        raise InvalidElementTypeError(element_type, str(exc)) from exc


def to_int(
    n: Numeral[T],
    *,
    seed: T | None = None,
    element_type: Callable[[], T] | None = None,
) -> int:
    """
    Count how many times ``n`` applies its argument.

    ``n`` is applied to an endofunction that returns its input unchanged and
    bumps a counter local to this call; the resulting function is run once
    on a seed and the produced value is discarded.

    The seed is ``element_type()`` when ``element_type`` is given, otherwise
    ``seed``. Any inhabitant works identically.
    """

    if element_type is not None:
        if seed is not None:
            raise TypeError("Pass either seed or element_type, not both")
        seed = _default_seed(element_type)

    count = 0

    def tick(x: T) -> T:
        nonlocal count
        count += 1
        return x

    n(tick)(seed)  # type: ignore[arg-type]
    logger.debug("Decoded %r as %d", n, count)
    return count
