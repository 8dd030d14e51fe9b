import pytest

from stlc.common.span import Span
from stlc.surface.errors import SurfaceError
from stlc.surface.parse import MAX_LITERAL, parse_term, parse_type
from stlc.syntax import SAbs, SApp, SFalse, SIf, SSucc, STrue, SVar, SZero, snumeral
from stlc.types import Arrow, Boolean, Number

N = Number()
B = Boolean()


def test_constants() -> None:
    assert parse_term("true") == STrue()
    assert parse_term("false") == SFalse()
    assert parse_term("0") == SZero()


def test_numeric_literal_desugars_to_succ_chain() -> None:
    assert parse_term("2") == SSucc(SSucc(SZero()))


def test_succ_takes_an_atom() -> None:
    assert parse_term("succ(0)") == SSucc(SZero())
    assert parse_term("succ succ x") == SSucc(SSucc(SVar("x")))
    assert parse_term("f succ 0") == SApp(SVar("f"), SSucc(SZero()))


def test_abstraction() -> None:
    assert parse_term("lambda x:Nat. succ(x)") == SAbs("x", N, SSucc(SVar("x")))


def test_lambda_symbols() -> None:
    expected = SAbs("x", B, SVar("x"))
    assert parse_term("\\x:Bool. x") == expected
    assert parse_term("λx:Bool. x") == expected


def test_abstraction_body_extends_right() -> None:
    assert parse_term("lambda x:Bool. x true") == SAbs(
        "x", B, SApp(SVar("x"), STrue())
    )


def test_application_is_left_associative() -> None:
    assert parse_term("f x y") == SApp(SApp(SVar("f"), SVar("x")), SVar("y"))
    assert parse_term("f (x y)") == SApp(SVar("f"), SApp(SVar("x"), SVar("y")))


def test_conditional() -> None:
    assert parse_term("if true then 0 else succ 0") == SIf(
        STrue(), SZero(), SSucc(SZero())
    )


def test_nested_abstraction_and_application() -> None:
    src = "(lambda x:Nat. lambda y:Nat. x) z"
    assert parse_term(src) == SApp(
        SAbs("x", N, SAbs("y", N, SVar("x"))), SVar("z")
    )


def test_trailing_semicolon() -> None:
    assert parse_term("true;") == STrue()


def test_arrow_types_are_right_associative() -> None:
    assert parse_type("Nat -> Bool -> Nat") == Arrow(N, Arrow(B, N))
    assert parse_type("(Nat -> Bool) -> Nat") == Arrow(Arrow(N, B), N)
    assert parse_type("Bool") == B


def test_arrow_type_annotation() -> None:
    assert parse_term("lambda f:Nat->Nat. f 0") == SAbs(
        "f", Arrow(N, N), SApp(SVar("f"), SZero())
    )


def test_spans() -> None:
    assert parse_term("  x").span == Span(2, 3)
    src = "lambda x:Nat. x"
    term = parse_term(src)
    assert term.span == Span(0, len(src))
    assert isinstance(term, SAbs)
    assert term.body.span == Span(14, 15)


def test_missing_annotation_is_rejected() -> None:
    with pytest.raises(SurfaceError, match="Unexpected token"):
        parse_term("lambda x. x")


def test_empty_input() -> None:
    with pytest.raises(SurfaceError, match="Unexpected end of input"):
        parse_term("")


def test_unexpected_character() -> None:
    with pytest.raises(SurfaceError, match="Unexpected character '\\+'"):
        parse_term("1 + 2")


def test_error_reports_snippet() -> None:
    with pytest.raises(SurfaceError) as exc:
        parse_term("if true then 0")
    assert exc.value.span == Span(14, 14)

    with pytest.raises(SurfaceError) as exc:
        parse_term("lambda x:Nat then")
    assert str(exc.value) == "Unexpected token @ 13:17: 'then'"


def test_type_parser_rejects_terms() -> None:
    with pytest.raises(SurfaceError):
        parse_type("true")


def test_leading_zeros_in_literal() -> None:
    assert parse_term("007") == snumeral(7)


def test_oversized_literal_is_rejected() -> None:
    src = f"succ {MAX_LITERAL + 1}"
    with pytest.raises(SurfaceError, match="Numeric literal exceeds") as exc:
        parse_term(src)
    assert exc.value.span == Span(5, len(src))

    with pytest.raises(SurfaceError) as exc:
        parse_term("1" + "0" * 5000)
    assert exc.value.span == Span(0, 5001)
