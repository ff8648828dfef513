"""Tokenizer, sign normalization and shunting-yard conversion"""

import pytest

from expression_engine.errors import ExpressionSyntaxError, LexError, ParseError
from expression_engine.parsing import (
    Token, TokenKind, tokenize, check_parentheses_balanced,
    handle_unary_operators, shunting_yard, parse, check_rpn_arity
)


def texts(tokens):
    return [t.text for t in tokens]


def test_tokenize_simple_arithmetic():
    tokens = tokenize("3 - 4*6/12 + 21")
    assert texts(tokens) == ['3', '-', '4', '*', '6', '/', '12', '+', '21']
    assert tokens[0].kind is TokenKind.NUMBER
    assert tokens[1].kind is TokenKind.OPERATOR


@pytest.mark.parametrize("literal", ["12", "2.5", "2.5e-3", "1.e5", "1.", "12e3", "3e+2"])
def test_tokenize_numeric_literals(literal):
    tokens = tokenize(literal)
    assert tokens == [Token(TokenKind.NUMBER, literal)]


def test_identifiers_are_not_classified_by_tokenizer():
    tokens = tokenize("sin(x2) + abc")
    assert tokens[0] == Token(TokenKind.IDENTIFIER, 'sin')
    assert tokens[2] == Token(TokenKind.IDENTIFIER, 'x2')
    assert tokens[-1] == Token(TokenKind.IDENTIFIER, 'abc')


@pytest.mark.parametrize("source", [".", "1e", "1e+", "1.5.2", "2x", "3#", "1e5.3", "2(x)", "x $ y"])
def test_malformed_input_raises_lex_error(source):
    with pytest.raises(LexError):
        tokenize(source)


def test_lex_error_reports_position():
    with pytest.raises(LexError) as excinfo:
        tokenize("3#")
    assert excinfo.value.position == 1
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("source", ["(1+2", ")(", "1)", "((x)"])
def test_unbalanced_parentheses(source):
    assert not check_parentheses_balanced(source)
    with pytest.raises(ExpressionSyntaxError):
        tokenize(source)


def test_unary_sign_gets_a_zero_operand():
    tokens = handle_unary_operators(tokenize("-x*(+3)"))
    assert texts(tokens) == ['0', '-', 'x', '*', '(', '0', '+', '3', ')']


def test_binary_minus_is_left_alone():
    tokens = handle_unary_operators(tokenize("x - 3"))
    assert texts(tokens) == ['x', '-', '3']


@pytest.mark.parametrize("source, expected", [
    ("3 - 4*6/12 + 21", "3 4 6 * 12 / - 21 +"),
    ("-12 + x", "0 12 - x +"),
    ("-x^2", "0 x 2 ^ -"),
    ("a^b^c", "a b ^ c ^"),
    ("sin(x)^2", "x sin 2 ^"),
    ("2*(x + 1)", "2 x 1 + *"),
    ("cos(exp(-a*x^2))", "0 a x 2 ^ * - exp cos"),
])
def test_rpn_order(source, expected):
    assert ' '.join(texts(parse(source))) == expected


def test_function_names_become_function_tokens():
    rpn = parse("exp(x) + y")
    kinds = {t.text: t.kind for t in rpn}
    assert kinds['exp'] is TokenKind.FUNCTION
    assert kinds['x'] is TokenKind.IDENTIFIER
    assert kinds['y'] is TokenKind.IDENTIFIER


def test_rpn_sequence_is_immutable():
    rpn = parse("x + 1")
    assert isinstance(rpn, tuple)


def test_shunting_yard_accepts_pre_normalized_tokens():
    rpn = shunting_yard(handle_unary_operators(tokenize("-(1 + 2)")))
    assert texts(rpn) == ['0', '1', '2', '+', '-']


@pytest.mark.parametrize("source", ["", "2 +", "()", "x y", "*"])
def test_missing_operands_are_rejected(source):
    with pytest.raises(ExpressionSyntaxError):
        parse(source)


def test_parse_errors_share_a_base_class():
    for source in (".", "(", "1e"):
        with pytest.raises(ParseError):
            parse(source)


def test_check_rpn_arity():
    assert check_rpn_arity(parse("x * y"))
    assert not check_rpn_arity((Token(TokenKind.OPERATOR, '+'),))
    assert not check_rpn_arity(())
