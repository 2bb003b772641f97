"""
Constants table for DeskCalc
Mathematical and physical constants that can be loaded into the display
"""
import math

from errors import UnknownFunction

# key -> symbol, name, value, unit (CODATA 2018 exact/recommended values)
CONSTANTS = {
    'pi':      {'symbol': 'π',   'name': 'Pi',                        'value': math.pi,          'unit': ''},
    'e':       {'symbol': 'e',   'name': "Euler's number",            'value': math.e,           'unit': ''},
    'phi':     {'symbol': 'φ',   'name': 'Golden ratio',              'value': (1 + math.sqrt(5)) / 2, 'unit': ''},
    'sqrt2':   {'symbol': '√2',  'name': 'Square root of 2',          'value': math.sqrt(2),     'unit': ''},
    'c':       {'symbol': 'c',   'name': 'Speed of light in vacuum',  'value': 299792458.0,      'unit': 'm/s'},
    'g':       {'symbol': 'g',   'name': 'Standard gravity',          'value': 9.80665,          'unit': 'm/s²'},
    'G':       {'symbol': 'G',   'name': 'Gravitational constant',    'value': 6.67430e-11,      'unit': 'm³/(kg·s²)'},
    'h':       {'symbol': 'h',   'name': 'Planck constant',           'value': 6.62607015e-34,   'unit': 'J·s'},
    'k':       {'symbol': 'k',   'name': 'Boltzmann constant',        'value': 1.380649e-23,     'unit': 'J/K'},
    'NA':      {'symbol': 'Nₐ',  'name': 'Avogadro constant',         'value': 6.02214076e23,    'unit': '1/mol'},
    'R':       {'symbol': 'R',   'name': 'Molar gas constant',        'value': 8.314462618,      'unit': 'J/(mol·K)'},
    'qe':      {'symbol': 'e',   'name': 'Elementary charge',         'value': 1.602176634e-19,  'unit': 'C'},
    'me':      {'symbol': 'mₑ',  'name': 'Electron mass',             'value': 9.1093837015e-31, 'unit': 'kg'},
    'mp':      {'symbol': 'mₚ',  'name': 'Proton mass',               'value': 1.67262192369e-27, 'unit': 'kg'},
    'eps0':    {'symbol': 'ε₀',  'name': 'Vacuum permittivity',       'value': 8.8541878128e-12, 'unit': 'F/m'},
    'mu0':     {'symbol': 'μ₀',  'name': 'Vacuum permeability',       'value': 1.25663706212e-6, 'unit': 'N/A²'},
    'atm':     {'symbol': 'atm', 'name': 'Standard atmosphere',       'value': 101325.0,         'unit': 'Pa'},
    'au':      {'symbol': 'au',  'name': 'Astronomical unit',         'value': 149597870700.0,   'unit': 'm'},
}


def get_constant(key):
    """Look up one constant by key"""
    if key not in CONSTANTS:
        raise UnknownFunction(f"Unknown constant: {key}")
    return dict(CONSTANTS[key], key=key)


def list_constants():
    return [dict(entry, key=key) for key, entry in CONSTANTS.items()]
