'''
Operators the machine can apply to its stack.

Every operator takes ints or floats, with IEEE 754 results (NaN, ±∞)
wherever Python's math module would rather raise. The only errors raised are
MathErrors, for the handful of cases a calculator user should be told about.
'''

from collections import namedtuple
import math
import operator

from .formatting import format_number
from .util import MathError


Operator = namedtuple('Operator', 'name aliases arity func')

# Largest integer a double holds exactly, along with all those below it.
MAX_SAFE_INTEGER = 2 ** 53 - 1


def _is_odd_integer(n):
    return math.isfinite(n) and float(n).is_integer() and n % 2 == 1


def _multiply(left, right):
    if (left == math.inf and right == 0) or (left == 0 and right == math.inf):
        raise MathError('cannot multiply {} by {}'.format(
            format_number(left), format_number(right)))
    return left * right


def _divide(left, right):
    if right == 0:
        raise MathError('cannot divide by 0')
    return left / right


def _factorial(n):
    n = float(n)
    if not (math.isfinite(n) and n.is_integer()) \
       or abs(n) > MAX_SAFE_INTEGER or n < 0:
        raise MathError('cannot find the factorial of {}'.format(
            format_number(n)))
    result = 1.0
    step = n
    # Past 170!, the product is stuck at infinity.
    while step > 0 and result != math.inf:
        result *= step
        step -= 1
    return result


def power(base, exponent):
    '''
    base ** exponent, never raising.
    '''
    if math.isnan(exponent):
        return math.nan
    if abs(base) == 1 and math.isinf(exponent):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional one.
        if base == 0:
            if math.copysign(1, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def _fmod(left, right):
    # Truncating, unlike %, which floors.
    if math.isinf(left):
        return math.nan
    return math.fmod(left, right)


def _remainder(left, right):
    if right == 0:
        raise MathError('cannot divide by 0')
    return _fmod(left, right)


def _modulo(left, right):
    if right == 0:
        raise MathError('cannot divide by 0')
    return _fmod(_fmod(left, right) + right, right)


def _root(radicand, degree):
    if degree == 0:
        raise MathError('cannot find a 0th root')
    return power(radicand, 1 / degree)


def _sqrt(n):
    if n < 0:
        return math.nan
    return math.sqrt(n)


def _truth(relation):
    '''
    Turn a boolean relation into one returning 1 or 0.
    '''
    def wrapped(left, right):
        return 1.0 if relation(left, right) else 0.0
    wrapped.__name__ = relation.__name__
    wrapped.__doc__ = relation.__doc__
    return wrapped


OPERATORS = (
    Operator('addition', ('+',), 2, operator.__add__),
    Operator('subtraction', ('-',), 2, operator.__sub__),
    Operator('multiplication', ('*', '\N{MULTIPLICATION SIGN}', 'x'), 2,
             _multiply),
    Operator('division', ('/', '\N{DIVISION SIGN}'), 2, _divide),
    Operator('factorial', ('!',), 1, _factorial),
    Operator('exponentiation', ('^', '**'), 2, power),
    Operator('remainder', ('%',), 2, _remainder),
    Operator('modulo', ('mod', '%%'), 2, _modulo),
    Operator('root', ('root',), 2, _root),
    Operator('square root', ('sqrt', '\N{SQUARE ROOT}'), 1, _sqrt),
    Operator('absolute value', ('|', 'abs'), 1, math.fabs),
    Operator('equation', ('=',), 2, _truth(operator.__eq__)),
    Operator('equation', ('!=',), 2, _truth(operator.__ne__)),
    Operator('comparison', ('<',), 2, _truth(operator.__lt__)),
    Operator('comparison', ('>',), 2, _truth(operator.__gt__)),
    Operator('comparison', ('<=',), 2, _truth(operator.__le__)),
    Operator('comparison', ('>=',), 2, _truth(operator.__ge__)),
)

ALIASES = {alias: op
           for op in OPERATORS
           for alias in op.aliases}


def lookup(token):
    '''
    Return the operator spelled token, ignoring case, or None.
    '''
    return ALIASES.get(token.lower())
