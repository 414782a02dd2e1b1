from collections import namedtuple

import regex

from . import constants, operators
from .util import ParseError


Lexeme = namedtuple('Lexeme', 'kind text sign')


def _alternation(aliases):
    # Longest first, so that ** isn't read as *, then *.
    return r'(?:' + r'|'.join(map(regex.escape,
                                  sorted(aliases, key=len, reverse=True))) \
           + r')'


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Tokens are separated by exactly one space. Two in a row make an empty
    # token, which reads as the number 0.
    SEPARATOR = ' '
    # Prefix negating a number or constant, when not the whole token.
    SIGN = '-'

    # Anything made of digits and dots. Those that aren't a valid number,
    # like 1.2.3, read as NaN.
    NUMBER = r'[0-9.]*'
    OPERATOR = _alternation(operators.ALIASES)
    CONSTANT = _alternation(constants.ALIASES)

    # All possible lexemes, in order of precedence.
    KINDS = 'number', 'operator', 'constant'
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<constant>' + CONSTANT + r')'
    # Default regex flags for matching lexemes. Case is left to classify(),
    # which lowers the way lookup() does.
    FLAGS = regex.VERSION1
    # What a browser trims off an expression: ASCII and Unicode space
    # separators, line terminators and the byte order mark.
    WHITESPACE = '\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004' \
                 '\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029' \
                 '\u202f\u205f\u3000\ufeff'

    def normalize(self, line):
        '''
        Trim surrounding whitespace and lower-case a line, ready to lex.
        '''
        return line.strip(type(self).WHITESPACE).lower()

    def lex(self, line):
        '''
        Take a line and yield its lexemes, lazily.

        Raises ParseError on the first bad token, but not before every token
        ahead of it has been yielded.
        '''
        for token in line.split(type(self).SEPARATOR):
            yield self.classify(token)

    def classify(self, token):
        '''
        Strip the sign prefix off a single token and say what's left.
        '''
        sign = 1
        if len(token) > 1 and token.startswith(type(self).SIGN):
            token = token[len(type(self).SIGN):]
            sign = -1
        token = token.lower()
        match = regex.fullmatch(type(self).LEXEME, token,
                                flags=type(self).FLAGS)
        if match is None:
            raise ParseError('bad token {}'.format(token))
        kind = next(kind
                    for kind
                    in type(self).KINDS
                    if match.group(kind) is not None)
        return Lexeme(kind, token, sign)
