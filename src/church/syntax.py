"""Parser for numeral expressions such as ``succ(2) * 3 ^ 2``."""

from __future__ import annotations

import logging
from typing import Any, Callable, cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from church.arith import add, exp, mult
from church.construct import from_int, one, succ, three, two, zero
from church.errors import Span, SurfaceError
from church.numeral import Numeral

logger = logging.getLogger(__name__)

_SOURCE: str = ""

_LITERALS: dict[str, Callable[[], Numeral[Any]]] = {
    "zero": zero,
    "one": one,
    "two": two,
    "three": three,
}

reserved = {
    "succ": "SUCC",
    "zero": "ZERO",
    "one": "ONE",
    "two": "TWO",
    "three": "THREE",
}

tokens = (
    "INT",
    "PLUS",
    "TIMES",
    "POW",
    "LPAREN",
    "RPAREN",
    *tuple(reserved.values()),
)

t_PLUS = r"\+"
t_TIMES = r"\*"
t_POW = r"\*\*|\^"
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.end = t.lexpos + len(t.value)
    t.value = int(t.value)
    return t


def t_NAME(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_]*"
    t.end = t.lexpos + len(t.value)
    if t.value not in reserved:
        raise SurfaceError(f"Unknown name {t.value!r}", Span(t.lexpos, t.end), _SOURCE)
    t.type = reserved[t.value]
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


precedence = (
    ("left", "PLUS"),
    ("left", "TIMES"),
    ("right", "POW"),
)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def p_expr_add(p: yacc.YaccProduction) -> None:
    "expr : expr PLUS expr"
    p[0] = add(p[1], p[3])


def p_expr_mult(p: yacc.YaccProduction) -> None:
    "expr : expr TIMES expr"
    p[0] = mult(p[1], p[3])


def p_expr_exp(p: yacc.YaccProduction) -> None:
    "expr : expr POW expr"
    p[0] = exp(p[1], p[3])


def p_expr_succ(p: yacc.YaccProduction) -> None:
    "expr : SUCC LPAREN expr RPAREN"
    p[0] = succ(p[3])


def p_expr_paren(p: yacc.YaccProduction) -> None:
    "expr : LPAREN expr RPAREN"
    p[0] = p[2]


def p_expr_int(p: yacc.YaccProduction) -> None:
    "expr : INT"
    p[0] = from_int(p[1])


def p_expr_literal(p: yacc.YaccProduction) -> None:
    """expr : ZERO
    | ONE
    | TWO
    | THREE"""
    p[0] = _LITERALS[p[1]]()


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise SurfaceError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise SurfaceError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_numeral(source: str) -> Numeral[Any]:
    global _SOURCE, _PARSER
    _SOURCE = source
    logger.debug("Parsing numeral expression %r", source)
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="expr", debug=False, write_tables=False)
    numeral = cast("Numeral[Any] | None", _PARSER.parse(source, lexer=lexer))
    if numeral is None:
        span = Span(len(source), len(source))
        raise SurfaceError("Unexpected end of input", span, source)
    return numeral
