"""
Unit Converter for DeskCalc
Linear categories convert through a base unit; temperature through Celsius
"""
from errors import InvalidDomain, UnknownFunction
from validation import check_operand, parse_number

# category -> unit -> factor to the category's base unit
UNITS = {
    'length': {
        'millimeter': 0.001, 'centimeter': 0.01, 'meter': 1.0, 'kilometer': 1000.0,
        'inch': 0.0254, 'foot': 0.3048, 'yard': 0.9144, 'mile': 1609.344,
        'nautical_mile': 1852.0,
    },
    'mass': {
        'milligram': 1e-6, 'gram': 0.001, 'kilogram': 1.0, 'tonne': 1000.0,
        'ounce': 0.028349523125, 'pound': 0.45359237, 'stone': 6.35029318,
    },
    'volume': {
        'milliliter': 0.001, 'liter': 1.0, 'cubic_meter': 1000.0,
        'teaspoon': 0.00492892159375, 'tablespoon': 0.01478676478125,
        'cup': 0.2365882365, 'pint': 0.473176473, 'quart': 0.946352946,
        'gallon': 3.785411784,
    },
    'area': {
        'square_meter': 1.0, 'square_kilometer': 1e6, 'square_foot': 0.09290304,
        'square_yard': 0.83612736, 'acre': 4046.8564224, 'hectare': 10000.0,
    },
    'speed': {
        'meter_per_second': 1.0, 'kilometer_per_hour': 1000.0 / 3600.0,
        'mile_per_hour': 0.44704, 'knot': 1852.0 / 3600.0,
    },
    'time': {
        'millisecond': 0.001, 'second': 1.0, 'minute': 60.0, 'hour': 3600.0,
        'day': 86400.0, 'week': 604800.0,
    },
    'data': {
        'bit': 0.125, 'byte': 1.0, 'kilobyte': 1024.0, 'megabyte': 1024.0 ** 2,
        'gigabyte': 1024.0 ** 3, 'terabyte': 1024.0 ** 4,
    },
}

TEMPERATURE_UNITS = ['celsius', 'fahrenheit', 'kelvin']
ABSOLUTE_ZERO_C = -273.15

CATEGORIES = list(UNITS) + ['temperature']


def list_units(category):
    if category == 'temperature':
        return list(TEMPERATURE_UNITS)
    if category not in UNITS:
        raise UnknownFunction(f"Unknown category: {category}")
    return list(UNITS[category])


def _to_celsius(x, unit):
    if unit == 'celsius':
        return x
    if unit == 'fahrenheit':
        return (x - 32) * 5 / 9
    return x - 273.15


def _from_celsius(c, unit):
    if unit == 'celsius':
        return c
    if unit == 'fahrenheit':
        return c * 9 / 5 + 32
    return c + 273.15


def convert(value, category, from_unit, to_unit):
    """Convert value between two units of the same category"""
    x = check_operand(parse_number(value))
    units = list_units(category)
    for unit in (from_unit, to_unit):
        if unit not in units:
            raise UnknownFunction(f"Unknown {category} unit: {unit}")

    if category == 'temperature':
        celsius = _to_celsius(x, from_unit)
        if celsius < ABSOLUTE_ZERO_C - 1e-9:
            raise InvalidDomain("Temperature below absolute zero")
        return _from_celsius(celsius, to_unit)

    table = UNITS[category]
    return x * table[from_unit] / table[to_unit]
