import pytest

from steel.interpreter import Interpreter


@pytest.fixture(scope="module")
def interp():
    itp = Interpreter()  # loads the bundled prelude
    yield itp
    itp.close()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(zero? 0)", True),
        ("(zero? 1)", False),
        ("(positive? 3)", True),
        ("(positive? -3)", False),
        ("(negative? -3)", True),
        ("(abs -4)", 4),
        ("(abs 4)", 4),
        ("(max 2 9)", 9),
        ("(min 2 9)", 2),
        ("(identity \"x\")", "x"),
        ("((compose abs -) 5)", 5),
        ("((compose (lambda (x) (* x 2)) (lambda (x) (+ x 1))) 3)", 8),
    ]
)
def test_prelude_helpers(interp, source, expected):
    assert interp.run(source) == expected


def test_prelude_functions_are_closures(interp):
    assert interp.run("(procedure? abs)") is True
    assert repr(interp.lookup_binding("abs")) == "#<lambda abs (n)>"
