import pytest

from environment import Environment
from errors import UndefinedVariable
from values import NIL, VBool, VNumber, VString


def test_declare_and_lookup():
    env = Environment()
    env.declare("a", VNumber(1.0))
    assert env.lookup("a") == VNumber(1.0)
    assert env.exists("a")
    assert env.exists_in_current_scope("a")


def test_lookup_missing_name():
    with pytest.raises(UndefinedVariable) as excinfo:
        Environment().lookup("missing")
    assert excinfo.value.name == "missing"


def test_redeclare_in_same_scope_overwrites():
    env = Environment()
    env.declare("a", VNumber(1.0))
    env.declare("a", VString("two"))
    assert env.lookup("a") == VString("two")


def test_lookup_walks_to_root():
    root = Environment()
    root.declare("a", VBool(True))
    leaf = root.child().child()
    assert leaf.lookup("a") == VBool(True)
    assert leaf.exists("a")
    assert not leaf.exists_in_current_scope("a")


def test_declare_shadows_outer_binding():
    root = Environment()
    root.declare("a", VNumber(1.0))
    inner = root.child()
    inner.declare("a", VNumber(2.0))
    assert inner.lookup("a") == VNumber(2.0)
    assert root.lookup("a") == VNumber(1.0)


def test_assign_updates_nearest_declaring_scope():
    root = Environment()
    root.declare("a", VNumber(1.0))
    middle = root.child()
    middle.declare("a", VNumber(2.0))
    leaf = middle.child()

    leaf.assign("a", VNumber(3.0))

    assert middle.lookup("a") == VNumber(3.0)
    assert root.lookup("a") == VNumber(1.0)
    assert not leaf.exists_in_current_scope("a")


def test_assign_undeclared_name_fails():
    env = Environment().child()
    with pytest.raises(UndefinedVariable):
        env.assign("nope", NIL)
    assert not env.exists("nope")
