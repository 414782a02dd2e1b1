'''
What a calculator front end keeps track of between keystrokes: the expression
being edited, where the cursor is, and the answers committed so far.

Nothing here outlives the session.
'''

from collections import namedtuple

from .machine import calculate


HistoryEntry = namedtuple('HistoryEntry', 'expression answer')


class Session:
    '''
    An expression being edited, with its live answer and committed history.
    '''

    def __init__(self):
        self.expression = ''
        self.selection = (0, 0)
        self.history = []

    @property
    def answer(self):
        '''
        Answer to the expression as it stands.
        '''
        return calculate(self.expression)

    @property
    def cursor(self):
        return max(self.selection)

    def type(self, text, cursor=None):
        '''
        Replace the expression, as if edited by hand.

        :param cursor: Where the cursor ends up. Defaults to the end.
        '''
        self.expression = text
        if cursor is None:
            cursor = len(text)
        self.selection = (cursor, cursor)

    def select(self, start, end):
        self.selection = (start, end)

    def press(self, label):
        '''
        Press a keypad button: replace the selection with its label, spaced
        from whatever comes before it, and move the cursor past the label.

        Returns the new answer.
        '''
        start, end = min(self.selection), max(self.selection)
        before = self.expression[:start]
        if not before.endswith(' '):
            before += ' '
        before += label
        self.type(before + self.expression[end:], cursor=len(before))
        return self.answer

    def commit(self):
        '''
        Record the expression and its answer in the history. The expression
        stays, ready for more editing.
        '''
        entry = HistoryEntry(self.expression, self.answer)
        self.history.append(entry)
        return entry

    def cancel(self):
        '''
        Throw away the expression.
        '''
        self.type('')

    def recall(self, index):
        '''
        Bring back the expression of a history entry.
        '''
        self.type(self.history[index].expression)
        return self.answer
