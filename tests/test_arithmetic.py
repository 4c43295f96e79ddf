import pytest

from steel.builtin.env_builtin import BUILTINS
from steel.errors import SteelArityMismatch, SteelContractViolation, SteelTypeMismatch


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(+ 1 2.5 3)", 6.5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(+)", 0),
        ("(*)", 1),
        ("(- 5)", -5),
        ("(/ 4)", 0.25),
        ("(/ 1 2)", 0.5),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


def test_numbers_are_floats(run):
    result = run("(+ 1 2)")
    assert isinstance(result, float)
    assert result == 3.0


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1 1)", True),
        ("(= 1 2)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(> 3 2 1)", True),
        ("(> 3 3)", False),
        ("(<= 1 1 2)", True),
        ("(<= 2 1)", False),
        ("(>= 2 2 1)", True),
        ("(>= 1 2)", False),
        ("(= 5)", True),
    ]
)
def test_comparison(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(not #f)", True),
        ("(not #t)", False),
        ("(not 0)", False),
        ('(not "")', False),
        ("(equal? 1 1)", True),
        ('(equal? "a" "a")', True),
        ('(equal? "a" "b")', False),
        ("(equal? #t #t)", True),
        ("(equal? 1 #t)", False),
        ("(equal? '(a (b)) '(a (b)))", True),
        ("(equal? 'a 'b)", False),
        ('(string-append "foo" "bar" "")', "foobar"),
        ("(string-append)", ""),
        ('(string-length "hello")', 5),
        ("(number? 1)", True),
        ("(number? #t)", False),
        ('(string? "s")', True),
        ("(string? 's)", False),
        ("(boolean? #f)", True),
        ("(boolean? 0)", False),
        ("(procedure? +)", True),
        ("(procedure? (lambda (x) x))", True),
        ("(procedure? 1)", False),
    ]
)
def test_primitives(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(/ 1 0)", SteelContractViolation),
        ("(/ 0)", SteelContractViolation),
        ("(/)", SteelArityMismatch),
        ("(-)", SteelArityMismatch),
        ("(<)", SteelArityMismatch),
        ('(+ 1 "2")', SteelTypeMismatch),
        ("(* #t 2)", SteelTypeMismatch),
        ("(< 1 'a)", SteelTypeMismatch),
        ("(not)", SteelArityMismatch),
        ("(not 1 2)", SteelArityMismatch),
        ("(equal? 1)", SteelArityMismatch),
        ("(string-append \"a\" 1)", SteelTypeMismatch),
        ("(string-length 5)", SteelTypeMismatch),
        ("(number?)", SteelArityMismatch),
    ]
)
def test_primitive_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_builtins_are_plain_functions_of_their_arguments():
    assert BUILTINS["+"]([1.0, 2.0]) == 3.0
    assert BUILTINS["<"]([1.0, 2.0]) is True
    assert BUILTINS["string-append"](["a", "b"]) == "ab"


def test_builtins_registered(env):
    for name in BUILTINS:
        assert env.lookup(name) is BUILTINS[name]
