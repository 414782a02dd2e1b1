from decimal import Decimal, Context, ROUND_HALF_UP
import math

from .constants import CONSTANTS


# Digits kept after the decimal point; drops floating point noise such as
# 0.30000000000000004.
PRECISION = 8
_QUANTUM = Decimal(1).scaleb(-PRECISION)
# Enough digits to quantize anything below _UNROUNDED.
_CONTEXT = Context(prec=40)
_UNROUNDED = 1e21


def format_number(value):
    '''
    Format a stack value for display.

    Constants, and their negations, display by name. Anything else is rounded
    to PRECISION fractional digits and printed as the shortest decimal that
    reads back as the same float.
    '''
    for constant in CONSTANTS:
        if value == constant.value:
            return constant.name
    for constant in CONSTANTS:
        if value == -constant.value:
            return '-' + constant.name
    return number_string(round_noise(value))


def round_noise(value):
    '''
    Round half away from zero to PRECISION fractional digits.

    NaN, infinities and anything too large to have a fractional part worth
    rounding are returned as is.
    '''
    if math.isnan(value) or abs(value) >= _UNROUNDED:
        return value
    return float(Decimal(value).quantize(_QUANTUM,
                                         rounding=ROUND_HALF_UP,
                                         context=_CONTEXT))


def number_string(value):
    '''
    Render a float like a browser would: 1 rather than 1.0, 1e-8 rather than
    1e-08, plain digits up to 1e21.
    '''
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '-Infinity' if value < 0 else 'Infinity'
    if value == 0:
        # Including -0.0
        return '0'
    sign = '-' if value < 0 else ''
    # repr() gives the shortest round-trip digits; normalize() strips the
    # trailing zeros out of them.
    _, digits, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = ''.join(map(str, digits))
    # Position of the decimal point relative to the first digit.
    point = exponent + len(digits)
    if len(digits) <= point <= 21:
        body = digits + '0' * (point - len(digits))
    elif 0 < point <= 21:
        body = digits[:point] + '.' + digits[point:]
    elif -6 < point <= 0:
        body = '0.' + '0' * -point + digits
    else:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += '.' + digits[1:]
        body = '{}e{}{}'.format(mantissa,
                                '+' if point > 0 else '-',
                                abs(point - 1))
    return sign + body
