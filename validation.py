"""
Number validation and formatting for DeskCalc
Shared by the engine, the function table and the helper modules
"""
import math
import re
from decimal import Decimal

import config
from errors import InvalidNumber, Overflow

# Longest numeric prefix, the way a lenient float parser reads text
_NUMBER_PREFIX = re.compile(r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_number(value):
    """Parse text (or pass a number through) into a float.

    Text without a numeric prefix gives NaN so that validation rejects it.
    """
    if isinstance(value, bool):
        raise InvalidNumber()
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX.match(str(value))
    if not match:
        return math.nan
    return float(match.group(0))


def validate_number(value):
    """Reject NaN and infinities"""
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
        raise InvalidNumber()
    return value


def prevent_overflow(value, limit=config.MAX_MAGNITUDE):
    """Reject magnitudes beyond the engine's domain boundary"""
    if abs(value) > limit:
        raise Overflow()
    return value


def check_operand(value):
    """Finiteness first, then range"""
    return prevent_overflow(validate_number(value))


def round_result(value, factor=config.ROUNDING_FACTOR):
    """Round half up to 8 decimal places to suppress floating point noise"""
    if float(value).is_integer():
        return float(value)
    return math.floor(value * factor + 0.5) / factor


def format_number(value):
    """Positional text form of a computed number (53.0 -> '53', 1e-08 -> '0.00000001')"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        # shortest round-tripping digits, never in exponent form
        return format(Decimal(repr(value)), "f")
    return str(value)


def to_exponential(value, digits=config.EXP_DIGITS):
    """Exponential notation with a compact exponent: 1.234568e+9"""
    mantissa, exponent = f"{value:.{digits}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"
