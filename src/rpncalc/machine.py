from collections import deque
import logging
import math

from . import constants, operators
from .formatting import format_number
from .lexer import Lexer
from .util import RPNError, MathError


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes lexemes and runs them. One machine per expression: nothing carries
    over from one evaluation to the next.
    '''

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def run(self, lexemes):
        '''
        Feed every lexeme, and return what's left on the stack, bottom first.
        '''
        for lexeme in lexemes:
            self.feed(lexeme)
        return list(self.stack)

    def feed(self, lexeme):
        '''
        Stack or run lexeme on machine.
        '''
        parsed = self.parse(lexeme)
        if self.isstackable(lexeme):
            self._pshstack(parsed)
        else:
            self._apply(parsed)
        logger.debug('%s %r: %s', lexeme.kind, lexeme.text, list(self.stack))

    def parse(self, lexeme):
        '''
        Parse lexeme into objects for machine: numbers or operators.
        '''
        if lexeme.kind == 'number':
            return self._iconvert(lexeme.text) * lexeme.sign
        elif lexeme.kind == 'constant':
            return constants.lookup(lexeme.text).value * lexeme.sign
        elif lexeme.kind == 'operator':
            # The sign has no meaning here; -+ is just +.
            return operators.lookup(lexeme.text)

    def isstackable(self, lexeme):
        '''
        Return true if stackable lexeme (e.g., number), rather than runnable.
        '''
        return lexeme.kind in {'number', 'constant'}

    def _arity(self, parsed):
        '''
        Return number of stack values consumed, if an operator.
        '''
        if isinstance(parsed, operators.Operator):
            return parsed.arity
        return None

    def _apply(self, op):
        '''
        Apply operator to stack, popping its arguments.
        '''
        if len(self.stack) < op.arity:
            raise MathError('cannot perform {} operation on {} values'.format(
                op.name, len(self.stack)))
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self._popstack(op.arity))
        self._pshstack(op.func(*args))

    def _iconvert(self, number):
        '''
        Convert digits and dots to a float. Nothing at all is 0, and
        anything else unparsable is NaN.
        '''
        if not number:
            return 0.0
        try:
            return float(number)
        except ValueError:
            return math.nan

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        return [self.stack.pop() for _ in range(n)]


def evaluate(expression):
    '''
    Evaluate an RPN expression, returning the stack left over, bottom first.

    Case and surrounding whitespace are ignored. Raises ParseError or
    MathError, and nothing else, for bad expressions.
    '''
    lexer = Lexer()
    machine = Machine()
    return machine.run(lexer.lex(lexer.normalize(expression)))


def calculate(expression):
    '''
    Evaluate expression into display text: the formatted stack, comma
    separated, or the message of whatever user error aborted it.
    '''
    try:
        stack = evaluate(expression)
    except RPNError as e:
        logger.debug('%r: %s', expression, e.args[0])
        return e.args[0]
    return ', '.join(map(format_number, stack))
