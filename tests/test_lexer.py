'''
RPN lexer tests
'''

import regex

from rpncalc.util import ParseError
from rpncalc.lexer import Lexer, Lexeme

from pytest import raises, mark


def test_kinds():
    l = Lexer()
    assert list(l.lex('3 pi +')) == [Lexeme('number', '3', 1),
                                     Lexeme('constant', 'pi', 1),
                                     Lexeme('operator', '+', 1)]


def test_sign_prefix():
    l = Lexer()
    assert l.classify('-4.5') == Lexeme('number', '4.5', -1)
    assert l.classify('-tau') == Lexeme('constant', 'tau', -1)


def test_bare_minus_is_subtraction():
    l = Lexer()
    assert l.classify('-') == Lexeme('operator', '-', 1)


def test_sign_on_operator_kept_as_lexeme():
    l = Lexer()
    assert l.classify('-+') == Lexeme('operator', '+', -1)


def test_longest_alias():
    l = Lexer()
    assert l.classify('**').text == '**'
    assert l.classify('%%').kind == 'operator'
    assert l.classify('<=').kind == 'operator'


def test_double_space_is_empty_number():
    l = Lexer()
    assert list(l.lex('1  2')) == [Lexeme('number', '1', 1),
                                   Lexeme('number', '', 1),
                                   Lexeme('number', '2', 1)]


@mark.parametrize('token', ['..', '1.2.3', '.', ''])
def test_dots_are_numbers(token):
    assert Lexer().classify(token).kind == 'number'


@mark.parametrize('token', ['X', 'PI', 'Abs', 'E'])
def test_ignores_case(token):
    assert Lexer().classify(token).kind in {'operator', 'constant'}


def test_bad_token():
    l = Lexer()
    with raises(ParseError, match=regex.escape('bad token foo')):
        l.classify('foo')


def test_double_sign_reports_stripped_token():
    l = Lexer()
    with raises(ParseError, match=regex.escape('bad token -4')):
        l.classify('--4')


def test_lazy():
    l = Lexer()
    lexemes = l.lex('1 foo')
    assert next(lexemes) == Lexeme('number', '1', 1)
    with raises(ParseError):
        next(lexemes)


def test_no_tabs():
    with raises(ParseError):
        list(Lexer().lex('1\t2'))


@mark.parametrize('token', ['ſqrt', 'abſ'])
def test_no_case_folding(token):
    # Long s folds to s, but lower() leaves it be.
    with raises(ParseError, match=regex.escape('bad token ' + token)):
        Lexer().classify(token)


def test_normalize_trims_like_a_browser():
    l = Lexer()
    assert l.normalize('\ufeff 3 PI\u3000\n') == '3 pi'
    assert l.normalize('\x1c3') == '\x1c3'
