"""Church numerals: natural numbers encoded as iterated function application."""

from church.arith import add, exp, mult
from church.construct import church, from_int, one, succ, three, two, zero
from church.errors import ChurchError, InvalidElementTypeError, Span, SurfaceError
from church.extract import to_int
from church.numeral import Church, Composition, Endo, Numeral, Succ, compose, identity
from church.syntax import parse_numeral

__all__ = [
    "Church",
    "ChurchError",
    "Composition",
    "Endo",
    "InvalidElementTypeError",
    "Numeral",
    "Span",
    "Succ",
    "SurfaceError",
    "add",
    "church",
    "compose",
    "exp",
    "from_int",
    "identity",
    "mult",
    "one",
    "parse_numeral",
    "succ",
    "three",
    "to_int",
    "two",
    "zero",
]
