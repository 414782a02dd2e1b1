'''
RPN calculator.

Type numbers, operators and constants separated by spaces, operators after
their operands: 2 3 4 + * is 14. Whatever is left on the stack is the answer,
with results that land on a known constant shown by name (2 pi * is τ).

Operators: + - * × x / ÷ ! ^ ** % mod %% root sqrt √ | abs = != < > <= >=
Constants: pi π, tau τ, phi φ, infinity ∞, e

A leading - negates a number or constant: -pi, -2.5. Standard floating point
only; no precedence, no infix.
'''

from .cli import CLI
from .formatting import format_number
from .lexer import Lexer
from .machine import Machine, evaluate, calculate
from .session import Session
from .util import RPNError, ParseError, MathError


__all__ = ('Machine', 'Lexer', 'CLI', 'Session', 'evaluate', 'calculate',
           'format_number', 'RPNError', 'ParseError', 'MathError')
