class RPNError(Exception):
    '''
    A user error that aborts the evaluation of a whole expression.

    The message, ``args[0]``, is what gets displayed in place of the answer.
    '''
    pass


class ParseError(RPNError):
    pass


class MathError(RPNError):
    pass
