"""
Scientific functions for DeskCalc
Single-argument operations applied to the current operand (angles in degrees)
"""
import math

import config
from errors import InvalidDomain, Overflow, UnknownFunction
from validation import check_operand, format_number, prevent_overflow


def factorial(n, limit=config.MAX_MAGNITUDE):
    """n! by repeated multiplication, failing as soon as the product passes the limit"""
    if n < 0 or not float(n).is_integer():
        raise InvalidDomain("Invalid input for factorial")
    result = 1
    for i in range(2, int(n) + 1):
        result *= i
        if result > limit:
            raise Overflow("Factorial too large")
    return result


def _sqrt(x):
    if x < 0:
        raise InvalidDomain("Invalid input for square root")
    return math.sqrt(x)


def _log10(x):
    if x <= 0:
        raise InvalidDomain("Invalid input for logarithm")
    return math.log10(x)


def _ln(x):
    if x <= 0:
        raise InvalidDomain("Invalid input for natural log")
    return math.log(x)


# name -> (function, expression label)
FUNCTIONS = {
    'sin':       (lambda x: math.sin(x * (math.pi / 180)), "sin({})"),
    'cos':       (lambda x: math.cos(x * (math.pi / 180)), "cos({})"),
    'tan':       (lambda x: math.tan(x * (math.pi / 180)), "tan({})"),
    'sqrt':      (_sqrt, "√{}"),
    'square':    (lambda x: x ** 2, "{}²"),
    'log10':     (_log10, "log({})"),
    'ln':        (_ln, "ln({})"),
    'factorial': (lambda x: float(factorial(x)), "{}!"),
    'abs':       (abs, "|{}|"),
    'pi':        (lambda x: math.pi, "π"),
    'e':         (lambda x: math.e, "e"),
}

# Button/keyboard names used by older front ends
ALIASES = {
    'pow': 'square',
    'log': 'log10',
}


def resolve(name):
    """Canonical function name, or UnknownFunction"""
    name = ALIASES.get(name, name)
    if name not in FUNCTIONS:
        raise UnknownFunction(f"Unknown function: {name}")
    return name


def apply(name, x):
    """Evaluate a function on an already parsed operand.

    Returns (result, expression). The operand is validated before the
    function runs and the result is range checked after.
    """
    check_operand(x)
    name = resolve(name)
    func, label = FUNCTIONS[name]
    result = float(func(x))
    prevent_overflow(result)
    return result, label.format(format_number(x))
