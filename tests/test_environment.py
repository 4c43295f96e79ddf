import pytest

from steel.errors import SteelArityMismatch, SteelTypeMismatch, SteelUnboundIdentifier
from steel.types.environment import Environment


@pytest.fixture
def env():
    """Return a fresh, empty environment for each test."""
    return Environment()


def test_define_and_lookup(env):
    env.define("x", 1.0)
    assert env.lookup("x") == 1.0


def test_redefinition_overwrites(env):
    env.define("x", 1.0)
    env.define("x", "two")
    assert env.lookup("x") == "two"


def test_lookup_unbound(env):
    with pytest.raises(SteelUnboundIdentifier):
        env.lookup("missing")


def test_define_requires_a_name(env):
    with pytest.raises(SteelTypeMismatch):
        env.define(42, 1.0)


def test_child_sees_parent_bindings(env):
    env.define("x", 1.0)
    child = env.new_child()
    assert child.outer is env
    assert child.lookup("x") == 1.0


def test_child_define_shadows_without_touching_parent(env):
    env.define("x", 1.0)
    child = env.new_child()
    child.define("x", 2.0)
    assert child.lookup("x") == 2.0
    assert env.lookup("x") == 1.0


def test_set_mutates_nearest_defining_frame(env):
    env.define("x", 1.0)
    middle = env.new_child()
    inner = middle.new_child()
    inner.set("x", 5.0)
    assert env.lookup("x") == 5.0
    assert "x" not in inner.vars
    assert "x" not in middle.vars


def test_set_prefers_shadowing_frame(env):
    env.define("x", 1.0)
    child = env.new_child()
    child.define("x", 2.0)
    child.set("x", 3.0)
    assert child.lookup("x") == 3.0
    assert env.lookup("x") == 1.0


def test_set_unbound(env):
    with pytest.raises(SteelUnboundIdentifier):
        env.new_child().set("nope", 1.0)


def test_define_then_set(env):
    env.define("x", 1.0)
    env.set("x", 2.0)
    assert env.lookup("x") == 2.0


def test_define_all(env):
    env.define_all(["a", "b"], [1.0, 2.0])
    assert env.lookup("a") == 1.0
    assert env.lookup("b") == 2.0


@pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0, 3.0]])
def test_define_all_arity_mismatch(env, values):
    with pytest.raises(SteelArityMismatch, match="expected 2 args"):
        env.define_all(["a", "b"], values)


def test_define_zipped_and_update(env):
    env.define_zipped([("a", 1.0), ("b", 2.0)])
    env.update({"c": 3.0})
    assert [env.lookup(n) for n in "abc"] == [1.0, 2.0, 3.0]


def test_find_and_contains(env):
    env.define("x", 1.0)
    child = env.new_child()
    assert child.find("x") is env
    assert child.find("y") is None
    assert "x" in child
    assert "y" not in child


def test_clear_bindings(env):
    env.define("x", 1.0)
    env.clear_bindings()
    with pytest.raises(SteelUnboundIdentifier):
        env.lookup("x")


def test_str_and_repr(env):
    env.define("x", 1.0)
    child = env.new_child()
    child.define("y", 2.0)
    assert str(child) == "{y: 2.0} -> ..."
    assert repr(child) == "<Environment chain: {y: 2.0} -> {x: 1.0}>"
