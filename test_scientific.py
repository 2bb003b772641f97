import math

import pytest

import scientific
from errors import InvalidDomain, InvalidNumber, Overflow, UnknownFunction


def test_trig_uses_degrees():
    assert scientific.apply('sin', 30)[0] == pytest.approx(0.5)
    assert scientific.apply('cos', 60)[0] == pytest.approx(0.5)
    assert scientific.apply('tan', 45)[0] == pytest.approx(1.0)


def test_tan_of_right_angle_overflows():
    with pytest.raises(Overflow):
        scientific.apply('tan', 90)


def test_sqrt():
    assert scientific.apply('sqrt', 9) == (3.0, "√9")
    with pytest.raises(InvalidDomain):
        scientific.apply('sqrt', -1)


def test_logarithms_reject_non_positive():
    assert scientific.apply('log10', 100)[0] == pytest.approx(2.0)
    assert scientific.apply('ln', math.e)[0] == pytest.approx(1.0)
    for name in ('log10', 'ln'):
        with pytest.raises(InvalidDomain):
            scientific.apply(name, 0)
        with pytest.raises(InvalidDomain):
            scientific.apply(name, -3)


def test_factorial_exact_values():
    assert scientific.factorial(0) == 1
    assert scientific.factorial(1) == 1
    assert scientific.factorial(10) == 3628800
    assert scientific.factorial(17) == 355687428096000


def test_factorial_overflows_once_past_limit():
    with pytest.raises(Overflow):
        scientific.factorial(18)
    # Fails fast rather than looping to n
    with pytest.raises(Overflow):
        scientific.factorial(1e14)


@pytest.mark.parametrize("n", [-1, 2.5, -0.5])
def test_factorial_domain(n):
    with pytest.raises(InvalidDomain):
        scientific.apply('factorial', n)


def test_constants_and_simple_functions():
    assert scientific.apply('pi', 7) == (math.pi, "π")
    assert scientific.apply('e', 7) == (math.e, "e")
    assert scientific.apply('abs', -4) == (4.0, "|-4|")
    assert scientific.apply('square', 12) == (144.0, "12²")
    assert scientific.apply('factorial', 5) == (120.0, "5!")


def test_aliases():
    assert scientific.apply('pow', 3)[0] == 9.0
    assert scientific.apply('log', 1000)[0] == pytest.approx(3.0)


def test_unknown_function():
    with pytest.raises(UnknownFunction):
        scientific.apply('cosh', 1)


def test_operand_validated_before_dispatch():
    with pytest.raises(InvalidNumber):
        scientific.apply('cosh', math.inf)
    with pytest.raises(Overflow):
        scientific.apply('abs', 1e16)


def test_square_result_range_checked():
    with pytest.raises(Overflow):
        scientific.apply('square', 1e8)
