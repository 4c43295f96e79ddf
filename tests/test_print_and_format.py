import pytest

from steel.builtin.env_builtin import BUILTINS
from steel.printer import display, format_number
from steel.types.void import Void


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (3.0, "3"),
        (-2.0, "-2"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        ("hi", '"hi"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\nb", '"a\\nb"'),
        (Void, "#<void>"),
    ]
)
def test_display_values(value, expected):
    assert display(value) == expected


@pytest.mark.parametrize(
    "n,expected",
    [
        (float("inf"), "+inf.0"),
        (float("-inf"), "-inf.0"),
        (float("nan"), "+nan.0"),
        (1e21, "1000000000000000000000"),
    ]
)
def test_format_number(n, expected):
    assert format_number(n) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'(a b c)", "(a b c)"),
        ("'(1 \"two\" #t (x))", '(1 "two" #t (x))'),
        ("'sym", "sym"),
        ("'()", "()"),
        ("''a", "(quote a)"),
        ("(lambda (a b) (+ a b))", "#<lambda (a b)>"),
        ("(define (sq x) (* x x)) sq", "#<lambda sq (x)>"),
        ("(define f (lambda () 1)) f", "#<lambda f ()>"),
        ("(define x 1)", "#<void>"),
    ]
)
def test_display_evaluated(run, source, expected):
    assert display(run(source)) == expected


def test_display_native():
    add = BUILTINS["+"]
    assert display(add) == f"#<procedure {add.__name__}>"
    assert display(BUILTINS["<"]) == "#<procedure <>"


def test_lambda_source_form(run):
    lam = run("(lambda (a b) (+ a b))")
    assert str(lam) == "(λ (a b) (+ a b))"


def test_define_keeps_first_name(run):
    run("(define (f) 1) (define g f)")
    assert display(run("g")) == "#<lambda f ()>"
