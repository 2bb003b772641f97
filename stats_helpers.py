"""
Statistics helpers for DeskCalc
Descriptive statistics over a list of entered values
"""
import statistics

from errors import InvalidDomain
from validation import check_operand, parse_number


def _values(values, minimum=1):
    numbers = [check_operand(parse_number(v)) for v in values]
    if len(numbers) < minimum:
        raise InvalidDomain(f"Need at least {minimum} value{'s' if minimum > 1 else ''}")
    return numbers


def mean(values):
    return statistics.fmean(_values(values))


def median(values):
    return float(statistics.median(_values(values)))


def mode(values):
    """Most common value (first one seen on ties)"""
    return float(statistics.mode(_values(values)))


def variance(values, sample=False):
    if sample:
        return statistics.variance(_values(values, minimum=2))
    return statistics.pvariance(_values(values))


def standard_deviation(values, sample=False):
    if sample:
        return statistics.stdev(_values(values, minimum=2))
    return statistics.pstdev(_values(values))


def summary(values, sample=False):
    numbers = _values(values, minimum=2 if sample else 1)
    return {
        'count': len(numbers),
        'sum': float(sum(numbers)),
        'min': min(numbers),
        'max': max(numbers),
        'mean': mean(numbers),
        'median': median(numbers),
        'mode': mode(numbers),
        'variance': variance(numbers, sample),
        'std_dev': standard_deviation(numbers, sample),
    }
