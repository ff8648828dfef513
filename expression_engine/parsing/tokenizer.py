"""
Tokenizer

Turns a raw expression string into a flat list of tokens. Numbers must start
with a digit, identifiers with a letter; whether an identifier names a
function or a free variable is decided later by the shunting-yard stage.
Every scanner either advances or fails, so no input can make it loop.
"""

import string
from enum import Enum
from typing import List, NamedTuple, Tuple

from ..errors import ExpressionSyntaxError, LexError
from ..logging_system import log_diagnostic
from ..operators import OPS

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
OPERATOR_CHARS = frozenset(OPS)


class TokenKind(Enum):
    NUMBER = 'number'
    IDENTIFIER = 'identifier'
    FUNCTION = 'function'
    OPERATOR = 'operator'
    LEFT_PAREN = 'left_paren'
    RIGHT_PAREN = 'right_paren'


class Token(NamedTuple):
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return self.text


def is_digit(c: str) -> bool:
    return c in DIGITS


def is_letter(c: str) -> bool:
    return c in LETTERS


def is_operator_char(c: str) -> bool:
    return c in OPERATOR_CHARS


def is_parenthesis(c: str) -> bool:
    return c == '(' or c == ')'


def is_left_parenthesis(c: str) -> bool:
    return c == '('


def is_right_parenthesis(c: str) -> bool:
    return c == ')'


def is_decimal_point(c: str) -> bool:
    return c == '.'


def _terminates_number(source: str, index: int) -> bool:
    """A numeric literal may only be followed by end of input, an operator, ')' or a space"""
    if index == len(source):
        return True
    c = source[index]
    return is_operator_char(c) or is_right_parenthesis(c) or c == ' '


def parse_identifier(source: str, start: int) -> Tuple[str, int]:
    """Consume letters and digits; returns (name, end index)"""
    j = start
    while j < len(source) and (is_letter(source[j]) or is_digit(source[j])):
        j += 1
    return source[start:j], j


def parse_integer(source: str, start: int) -> Tuple[str, int]:
    j = start
    while j < len(source) and is_digit(source[j]):
        j += 1
    return source[start:j], j


def _fail_number(source: str, position: int) -> LexError:
    log_diagnostic("Invalid numerical value", source)
    return LexError(f"Invalid numerical value at position {position} in {source!r}",
                    source, position)


def parse_after_exponent(source: str, prefix: str, index: int) -> Tuple[str, int]:
    """Scan 'e[+-]?digits' where index points just past the 'e'"""
    text = prefix + 'e'
    j = index
    if j < len(source) and source[j] in '+-':
        text += source[j]
        j += 1
    if j == len(source) or not is_digit(source[j]):
        raise _fail_number(source, j)
    digits, j = parse_integer(source, j)
    if not _terminates_number(source, j):
        raise _fail_number(source, j)
    return text + digits, j


def parse_after_decimal(source: str, prefix: str, index: int) -> Tuple[str, int]:
    """Scan the fractional part where index points just past the '.'"""
    digits, j = parse_integer(source, index)
    text = prefix + '.' + digits
    if _terminates_number(source, j):
        return text, j
    if source[j] == 'e':
        return parse_after_exponent(source, text, j + 1)
    raise _fail_number(source, j)


def parse_number(source: str, start: int) -> Tuple[str, int]:
    """Scan a numeric literal starting at a digit; returns (literal, end index)"""
    text, j = parse_integer(source, start)
    if _terminates_number(source, j):
        return text, j
    if source[j] == 'e':
        return parse_after_exponent(source, text, j + 1)
    if is_decimal_point(source[j]):
        return parse_after_decimal(source, text, j + 1)
    raise _fail_number(source, j)


def check_parentheses_balanced(source: str) -> bool:
    depth = 0
    for c in source:
        if is_left_parenthesis(c):
            depth += 1
        elif is_right_parenthesis(c):
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def tokenize(source: str) -> List[Token]:
    """
    Split an expression into tokens.

    Raises:
        ExpressionSyntaxError: parentheses do not balance
        LexError: unknown character or malformed number
    """
    if not check_parentheses_balanced(source):
        log_diagnostic("Unbalanced parentheses", source)
        raise ExpressionSyntaxError(f"Unbalanced parentheses in {source!r}")

    tokens: List[Token] = []
    i = 0
    while i < len(source):
        c = source[i]
        if is_digit(c):
            text, i = parse_number(source, i)
            tokens.append(Token(TokenKind.NUMBER, text))
        elif is_letter(c):
            name, i = parse_identifier(source, i)
            tokens.append(Token(TokenKind.IDENTIFIER, name))
        elif is_operator_char(c):
            tokens.append(Token(TokenKind.OPERATOR, c))
            i += 1
        elif is_left_parenthesis(c):
            tokens.append(Token(TokenKind.LEFT_PAREN, c))
            i += 1
        elif is_right_parenthesis(c):
            tokens.append(Token(TokenKind.RIGHT_PAREN, c))
            i += 1
        elif c == ' ':
            i += 1
        else:
            log_diagnostic("Invalid expression", source)
            raise LexError(f"Unexpected character {c!r} at position {i} in {source!r}",
                           source, i)
    return tokens
