'''
Named mathematical constants, recognized by any of their aliases.
'''

from collections import namedtuple
import math


Constant = namedtuple('Constant', 'name aliases value')

# Order matters: the formatter picks the first constant equal to a value.
CONSTANTS = (
    Constant('\N{GREEK SMALL LETTER PI}',
             ('pi', '\N{GREEK SMALL LETTER PI}'),
             math.pi),
    Constant('\N{GREEK SMALL LETTER TAU}',
             ('tau', '\N{GREEK SMALL LETTER TAU}'),
             2 * math.pi),
    Constant('\N{GREEK SMALL LETTER PHI}',
             ('phi', '\N{GREEK SMALL LETTER PHI}'),
             (1 + math.sqrt(5)) / 2),
    Constant('\N{INFINITY}',
             ('infinity', '\N{INFINITY}'),
             math.inf),
    Constant('e', ('e',), math.e),
)

ALIASES = {alias: constant
           for constant in CONSTANTS
           for alias in constant.aliases}


def lookup(token):
    '''
    Return the constant spelled token, ignoring case, or None.
    '''
    return ALIASES.get(token.lower())
