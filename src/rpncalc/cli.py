from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings

from .util import RPNError
from .machine import Machine, calculate
from .lexer import Lexer
from .session import Session


logger = logging.getLogger(__name__)


class InteractiveInput:
    '''
    Lines typed at a prompt, with the answer shown live as you type.
    '''

    def __init__(self, prompt, session, keypad):
        self.prompt = prompt
        self.session = session
        self.keypad = keypad

    def _answer(self):
        return calculate(get_app().current_buffer.text)

    def _presser(self, label):
        def press(event):
            buffer = event.current_buffer
            self.session.type(buffer.text, cursor=buffer.cursor_position)
            if buffer.selection_state is not None:
                self.session.select(*buffer.document.selection_range())
            self.session.press(label)
            buffer.document = Document(self.session.expression,
                                       self.session.cursor)
        return press

    def key_bindings(self):
        '''
        Alt+key for keypad buttons, Ctrl-C to start over.
        '''
        bindings = KeyBindings()
        for key, label in self.keypad.items():
            bindings.add('escape', key)(self._presser(label))

        @bindings.add('c-c')
        def cancel(event):
            self.session.cancel()
            event.current_buffer.reset()

        return bindings

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Up arrow recalls, but only this session
                                    history=InMemoryHistory(),
                                    key_bindings=self.key_bindings(),
                                    bottom_toolbar=self._answer,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                # Enter keeps the expression around, like a calculator.
                yield session.prompt(default=self.session.expression)
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    # Alt+key inserts these, like buttons on a calculator.
    KEYPAD = {
        'p': '\N{GREEK SMALL LETTER PI}',
        't': '\N{GREEK SMALL LETTER TAU}',
        'f': '\N{GREEK SMALL LETTER PHI}',
        'i': '\N{INFINITY}',
        'r': '\N{SQUARE ROOT}',
        'x': '\N{MULTIPLICATION SIGN}',
        'd': '\N{DIVISION SIGN}',
    }

    def dumper(self):
        '''
        Dump all lexemes, their kind, and arity.
        '''
        machine = Machine()
        lexer = Lexer()
        print('<kind>\t<repr(text)>\t<sign>\t<arity>')
        for line in self.args.expressions:
            try:
                for lexeme in lexer.lex(lexer.normalize(line)):
                    print(lexeme.kind,
                          repr(lexeme.text),
                          lexeme.sign,
                          machine._arity(machine.parse(lexeme)),
                          sep='\t')
            except RPNError as e:
                print(e.args[0])

    def executor(self):
        '''
        Run calculator on every expression, printing each answer.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\n')
            if self._interactive():
                # Only a prompt can bring history back.
                self.session.type(line)
                entry = self.session.commit()
                print(entry.expression, '=', entry.answer)
            else:
                print(calculate(line))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input instead of stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    session=self.session,
                                    keypad=self.KEYPAD)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.session = Session()
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every step to stderr')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            stream=stderr,
                            format='%(name)s: %(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        logger.debug('running %s', self.args.action.__name__)
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    cli = CLI()
    cli.run()
