import pytest

import converter
from errors import InvalidDomain, InvalidNumber, UnknownFunction


@pytest.mark.parametrize("value, category, src, dst, expected", [
    (1, 'length', 'mile', 'kilometer', 1.609344),
    (12, 'length', 'inch', 'foot', 1.0),
    (1, 'mass', 'kilogram', 'pound', 2.2046226218),
    (1, 'volume', 'gallon', 'liter', 3.785411784),
    (1, 'area', 'hectare', 'square_meter', 10000.0),
    (36, 'speed', 'kilometer_per_hour', 'meter_per_second', 10.0),
    (2, 'time', 'hour', 'minute', 120.0),
    (1, 'data', 'gigabyte', 'megabyte', 1024.0),
    (32, 'temperature', 'fahrenheit', 'celsius', 0.0),
    (0, 'temperature', 'kelvin', 'celsius', -273.15),
    (25, 'temperature', 'celsius', 'kelvin', 298.15),
])
def test_convert(value, category, src, dst, expected):
    assert converter.convert(value, category, src, dst) == pytest.approx(expected)


def test_same_unit_round_trip():
    assert converter.convert("3.5", 'length', 'meter', 'meter') == 3.5


def test_below_absolute_zero():
    with pytest.raises(InvalidDomain):
        converter.convert(-500, 'temperature', 'celsius', 'kelvin')


def test_unknown_category_and_unit():
    with pytest.raises(UnknownFunction):
        converter.convert(1, 'energy', 'joule', 'calorie')
    with pytest.raises(UnknownFunction):
        converter.convert(1, 'mass', 'kilogram', 'carat')


def test_invalid_value():
    with pytest.raises(InvalidNumber):
        converter.convert("", 'length', 'meter', 'foot')


def test_list_units():
    assert converter.list_units('temperature') == ['celsius', 'fahrenheit', 'kelvin']
    assert 'meter' in converter.list_units('length')
    assert set(converter.CATEGORIES) >= {'length', 'mass', 'temperature'}
