import pytest

from values import NIL, FALSE, TRUE, VBool, VNil, VNumber, VString, is_truthy


@pytest.mark.parametrize(
    "value, expected",
    [
        (NIL, False),
        (FALSE, False),
        (TRUE, True),
        (VNumber(0.0), True),
        (VString(""), True),
        (VString("x"), True),
    ],
)
def test_truthiness(value, expected):
    assert is_truthy(value) is expected


def test_equality_is_structural_and_type_strict():
    assert VNumber(1.0) == VNumber(1.0)
    assert VString("a") == VString("a")
    assert VNil() == NIL
    assert VBool(True) != VNumber(1.0)
    assert VBool(False) != VNumber(0.0)
    assert VString("1") != VNumber(1.0)
    assert NIL != FALSE


@pytest.mark.parametrize(
    "value, text",
    [
        (NIL, "nil"),
        (TRUE, "true"),
        (FALSE, "false"),
        (VNumber(3.0), "3"),
        (VNumber(-12.0), "-12"),
        (VNumber(-0.0), "-0"),
        (VNumber(float("nan")), "NaN"),
        (VNumber(2.5), "2.5"),
        (VNumber(0.1 + 0.2), "0.30000000000000004"),
        (VNumber(float("inf")), "inf"),
        (VString("plain text"), "plain text"),
    ],
)
def test_str(value, text):
    assert str(value) == text
