"""Parser for the surface language.

Grammar (``ply`` LALR)::

    top  : term | term ';'
    term : lambda IDENT ':' ty '.' term
         | if term then term else term
         | app
    app  : app atom | atom
    atom : true | false | INT | IDENT | succ atom | '(' term ')'
    ty   : aty '->' ty | aty
    aty  : Bool | Nat | '(' ty ')'

Abstractions and conditionals extend as far right as possible, application
is left associative and arrows are right associative. Integer literals are
desugared to ``succ`` chains over ``0`` and may not exceed ``MAX_LITERAL``.
"""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from stlc.common.span import Span
from stlc.surface.errors import SurfaceError
from stlc.syntax import (
    SAbs,
    SApp,
    SFalse,
    SIf,
    SSucc,
    STrue,
    SurfaceTerm,
    SVar,
    snumeral,
)
from stlc.types import Arrow, Boolean, Number, Type

_SOURCE: str = ""

# Literals unfold into one node per unit.
MAX_LITERAL = 100_000

reserved = {
    "lambda": "LAMBDA",
    "if": "IF",
    "then": "THEN",
    "else": "ELSE",
    "true": "TRUE",
    "false": "FALSE",
    "succ": "SUCC",
    "Bool": "BOOL",
    "Nat": "NAT",
}

tokens = (
    "IDENT",
    "INT",
    "ARROW",
    "COLON",
    "DOT",
    "LPAREN",
    "RPAREN",
    "SEMI",
    *tuple(reserved.values()),
)

t_ARROW = r"->"
t_COLON = r":"
t_DOT = r"\."
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_SEMI = r";"

t_ignore = " \t\r"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_backslash(t: lex.LexToken) -> lex.LexToken:
    r"\\|λ"
    t.type = "LAMBDA"
    t.end = t.lexpos + len(t.value)
    return t


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.end = t.lexpos + len(t.value)
    digits = t.value.lstrip("0") or "0"
    # Compare lengths first; int() refuses very long digit strings.
    if len(digits) > len(str(MAX_LITERAL)) or int(digits) > MAX_LITERAL:
        span = Span(t.lexpos, t.end)
        raise SurfaceError(f"Numeric literal exceeds {MAX_LITERAL}", span, _SOURCE)
    t.value = int(digits)
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_']*"
    t.type = reserved.get(t.value, "IDENT")
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def _item_span(p: yacc.YaccProduction, index: int) -> Span:
    value = p[index]
    if isinstance(value, SurfaceTerm) and value.span is not None:
        return value.span
    tok = cast(lex.LexToken, p.slice[index])
    return _tok_span(tok)


def _span(p: yacc.YaccProduction, start: int, end: int) -> Span:
    return _item_span(p, start).to(_item_span(p, end))


def p_top(p: yacc.YaccProduction) -> None:
    "top : term"
    p[0] = p[1]


def p_top_semi(p: yacc.YaccProduction) -> None:
    "top : term SEMI"
    p[0] = p[1]


def p_term_abs(p: yacc.YaccProduction) -> None:
    "term : LAMBDA IDENT COLON ty DOT term"
    span = _span(p, 1, 6)
    p[0] = SAbs(p[2], p[4], p[6], span=span)


def p_term_if(p: yacc.YaccProduction) -> None:
    "term : IF term THEN term ELSE term"
    span = _span(p, 1, 6)
    p[0] = SIf(p[2], p[4], p[6], span=span)


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : app"
    p[0] = p[1]


def p_app_chain(p: yacc.YaccProduction) -> None:
    "app : app atom"
    span = _span(p, 1, 2)
    p[0] = SApp(p[1], p[2], span=span)


def p_app_atom(p: yacc.YaccProduction) -> None:
    "app : atom"
    p[0] = p[1]


def p_atom_true(p: yacc.YaccProduction) -> None:
    "atom : TRUE"
    p[0] = STrue(span=_span(p, 1, 1))


def p_atom_false(p: yacc.YaccProduction) -> None:
    "atom : FALSE"
    p[0] = SFalse(span=_span(p, 1, 1))


def p_atom_int(p: yacc.YaccProduction) -> None:
    "atom : INT"
    p[0] = snumeral(p[1], span=_span(p, 1, 1))


def p_atom_ident(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = SVar(p[1], span=_span(p, 1, 1))


def p_atom_succ(p: yacc.YaccProduction) -> None:
    "atom : SUCC atom"
    p[0] = SSucc(p[2], span=_span(p, 1, 2))


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN term RPAREN"
    p[0] = p[2]


def p_ty_arrow(p: yacc.YaccProduction) -> None:
    "ty : aty ARROW ty"
    p[0] = Arrow(p[1], p[3])


def p_ty_atom(p: yacc.YaccProduction) -> None:
    "ty : aty"
    p[0] = p[1]


def p_aty_bool(p: yacc.YaccProduction) -> None:
    "aty : BOOL"
    p[0] = Boolean()


def p_aty_nat(p: yacc.YaccProduction) -> None:
    "aty : NAT"
    p[0] = Number()


def p_aty_paren(p: yacc.YaccProduction) -> None:
    "aty : LPAREN ty RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise SurfaceError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise SurfaceError("Unexpected token", span, _SOURCE)


_LEXER = None
_TERM_PARSER = None
_TYPE_PARSER = None


def _lexer() -> lex.Lexer:
    global _LEXER
    if _LEXER is None:
        _LEXER = lex.lex()
    lexer = _LEXER.clone()
    lexer.lineno = 1
    return lexer


def parse_term(source: str) -> SurfaceTerm:
    """Parse ``source`` into a named syntax tree."""

    global _SOURCE, _TERM_PARSER
    _SOURCE = source
    lexer = _lexer()
    if _TERM_PARSER is None:
        _TERM_PARSER = yacc.yacc(start="top", debug=False, write_tables=False)
    term = cast("SurfaceTerm | None", _TERM_PARSER.parse(source, lexer=lexer))
    if term is None:
        span = Span(len(source), len(source))
        raise SurfaceError("Unexpected end of input", span, source)
    return term


def parse_type(source: str) -> Type:
    """Parse a type such as ``Nat -> Bool -> Nat``."""

    global _SOURCE, _TYPE_PARSER
    _SOURCE = source
    lexer = _lexer()
    if _TYPE_PARSER is None:
        # The term rules are unreachable from ``ty``; silence yacc's report.
        _TYPE_PARSER = yacc.yacc(
            start="ty",
            debug=False,
            write_tables=False,
            errorlog=yacc.NullLogger(),
        )
    ty = cast("Type | None", _TYPE_PARSER.parse(source, lexer=lexer))
    if ty is None:
        span = Span(len(source), len(source))
        raise SurfaceError("Unexpected end of input", span, source)
    return ty


__all__ = ["MAX_LITERAL", "parse_term", "parse_type"]
