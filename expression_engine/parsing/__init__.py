"""Tokenizer and shunting-yard conversion of expression strings."""

from .tokenizer import (
    Token, TokenKind, tokenize, check_parentheses_balanced,
    parse_number, parse_identifier
)
from .shunting_yard import RpnSequence, handle_unary_operators, shunting_yard
from .parser import parse, check_rpn_arity

__all__ = [
    'Token', 'TokenKind', 'tokenize', 'check_parentheses_balanced',
    'parse_number', 'parse_identifier',
    'RpnSequence', 'handle_unary_operators', 'shunting_yard',
    'parse', 'check_rpn_arity'
]
