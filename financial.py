"""
Financial helpers for DeskCalc
Interest, loan repayment, percentage and discount formulas (money rounded to 2 places)
"""
from errors import InvalidDomain, Overflow
from validation import check_operand, parse_number, prevent_overflow


def _amount(value, name, allow_zero=True):
    x = check_operand(parse_number(value))
    if x < 0 or (x == 0 and not allow_zero):
        raise InvalidDomain(f"Invalid {name}")
    return x


def _growth(rate, periods):
    """(1 + rate) ** periods; a float overflow is reported as Overflow"""
    try:
        return (1 + rate) ** periods
    except OverflowError:
        raise Overflow() from None


def simple_interest(principal, rate, years):
    """Interest earned at a flat annual rate (rate in percent)"""
    p = _amount(principal, "principal")
    r = _amount(rate, "rate") / 100
    t = _amount(years, "period")
    interest = p * r * t
    return {
        'interest': round(interest, 2),
        'total': round(p + interest, 2),
    }


def compound_interest(principal, rate, years, compounds_per_year=1):
    """Final amount with interest compounded n times a year"""
    p = _amount(principal, "principal")
    r = _amount(rate, "rate") / 100
    t = _amount(years, "period")
    n = _amount(compounds_per_year, "compounding frequency", allow_zero=False)
    total = prevent_overflow(p * _growth(r / n, n * t))
    return {
        'interest': round(total - p, 2),
        'total': round(total, 2),
    }


def loan_payment(principal, annual_rate, months):
    """Fixed monthly instalment (EMI) for an amortised loan"""
    p = _amount(principal, "principal")
    r = _amount(annual_rate, "rate") / 100 / 12
    n = _amount(months, "term", allow_zero=False)

    growth = _growth(r, n)
    if growth == 1:
        payment = p / n
    else:
        payment = p * r / (1 - 1 / growth)
    check_operand(payment)
    return {
        'payment': round(payment, 2),
        'total_paid': round(payment * n, 2),
        'total_interest': round(payment * n - p, 2),
    }


def percentage_of(value, percent):
    """percent % of value"""
    x = check_operand(parse_number(value))
    pct = check_operand(parse_number(percent))
    return check_operand(x * pct / 100)


def discount(price, percent):
    """Price after a percentage discount and the amount saved"""
    p = _amount(price, "price")
    d = _amount(percent, "discount")
    if d > 100:
        raise InvalidDomain("Invalid discount")
    saved = p * d / 100
    return {
        'final': round(p - saved, 2),
        'saved': round(saved, 2),
    }


def tip_split(bill, tip_percent, people=1):
    """Tip, total and per-person share of a bill"""
    b = _amount(bill, "bill")
    tip_rate = _amount(tip_percent, "tip")
    count = _amount(people, "number of people", allow_zero=False)
    if not float(count).is_integer():
        raise InvalidDomain("Invalid number of people")
    tip = b * tip_rate / 100
    total = b + tip
    return {
        'tip': round(tip, 2),
        'total': round(total, 2),
        'per_person': round(total / count, 2),
    }


FORMULAS = {
    'simple_interest': simple_interest,
    'compound_interest': compound_interest,
    'loan_payment': loan_payment,
    'percentage_of': percentage_of,
    'discount': discount,
    'tip_split': tip_split,
}
