'''
Number formatting tests
'''

import math

from rpncalc.formatting import format_number, number_string, round_noise
from rpncalc.machine import evaluate

from pytest import mark


@mark.parametrize('value, text', [
    (math.pi, 'π'),
    (2 * math.pi, 'τ'),
    ((1 + math.sqrt(5)) / 2, 'φ'),
    (math.inf, '∞'),
    (math.e, 'e'),
    (-math.pi, '-π'),
    (-math.inf, '-∞'),
    (-math.e, '-e'),
])
def test_constants_by_name(value, text):
    assert format_number(value) == text


@mark.parametrize('value, text', [
    (7.0, '7'),
    (-3.0, '-3'),
    (0.1 + 0.2, '0.3'),
    (2.5, '2.5'),
    (1e16, '10000000000000000'),
    (1e21, '1e+21'),
    (1.5e300, '1.5e+300'),
    (0.000001, '0.000001'),
    (1e-8, '1e-8'),
    (1e-9, '0'),
    (-0.0, '0'),
    (math.nan, 'NaN'),
    (123.456, '123.456'),
])
def test_plain_numbers(value, text):
    assert format_number(value) == text


def test_rounds_half_away_from_zero():
    # Exactly representable, so exactly halfway at the last kept digit.
    assert format_number(2 ** -9) == '0.00195313'
    assert format_number(-2 ** -9) == '-0.00195313'


def test_number_string_infinities():
    assert number_string(math.inf) == 'Infinity'
    assert number_string(-math.inf) == '-Infinity'


def test_round_noise_leaves_huge_values():
    assert round_noise(1e22) == 1e22
    assert math.isnan(round_noise(math.nan))


@mark.parametrize('name', ['π', 'τ', 'φ', '∞', 'e', '-π'])
def test_idempotent_on_constants(name):
    value, = evaluate(name)
    assert format_number(value) == name
    assert format_number(value) == format_number(value)


@mark.parametrize('value', [
    0.1, -0.1, 1 / 3, -2 / 3, 1234.5678, 98765.4321e3, 1e-7, 4.2e20,
    123456789.123456789, 0.30000000000000004,
])
def test_reads_back(value):
    assert abs(float(format_number(value)) - value) <= 1e-8
