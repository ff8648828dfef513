"""
Shunting-yard conversion from infix tokens to reverse polish notation.

References:
    Wikipedia - Shunting Yard Algorithm
    https://en.wikipedia.org/wiki/Shunting_yard_algorithm
"""

from typing import List, Sequence, Tuple

from ..operators import is_function_name, precedence_of
from .tokenizer import Token, TokenKind

RpnSequence = Tuple[Token, ...]

ZERO = Token(TokenKind.NUMBER, '0')


def _is_sign(token: Token) -> bool:
    return token.kind is TokenKind.OPERATOR and token.text in '+-'


def handle_unary_operators(tokens: Sequence[Token]) -> List[Token]:
    """
    Rewrite a leading sign, or a sign right after '(', as a binary operation on 0.

    This is a textual rewrite, so '-x^2' becomes '0 - x^2' and the power
    still binds tighter than the sign.
    """
    result: List[Token] = []
    for i, token in enumerate(tokens):
        if _is_sign(token) and (i == 0 or tokens[i - 1].kind is TokenKind.LEFT_PAREN):
            result.append(ZERO)
        result.append(token)
    return result


def _classify(token: Token) -> Token:
    if token.kind is TokenKind.IDENTIFIER and is_function_name(token.text):
        return Token(TokenKind.FUNCTION, token.text)
    return token


def handle_operators(op_new: Token, operator_stack: List[Token], rpn: List[Token]):
    """Pop operators of greater or equal precedence, stopping at '(', then push op_new"""
    while operator_stack:
        op_prev = operator_stack[-1]
        if (op_prev.kind is TokenKind.LEFT_PAREN
                or precedence_of(op_new.text) > precedence_of(op_prev.text)):
            break
        rpn.append(operator_stack.pop())
    operator_stack.append(op_new)


def shunting_yard(tokens: Sequence[Token]) -> RpnSequence:
    """Convert an infix token list (signs already normalized) to postfix order"""
    rpn: List[Token] = []
    operator_stack: List[Token] = []
    for token in map(_classify, tokens):
        if token.kind in (TokenKind.NUMBER, TokenKind.IDENTIFIER):
            rpn.append(token)
        elif token.kind is TokenKind.LEFT_PAREN:
            operator_stack.append(token)
        elif token.kind is TokenKind.RIGHT_PAREN:
            while operator_stack and operator_stack[-1].kind is not TokenKind.LEFT_PAREN:
                rpn.append(operator_stack.pop())
            if operator_stack:
                operator_stack.pop()
        else:
            # operators and function names share the same stack handling
            handle_operators(token, operator_stack, rpn)
    while operator_stack:
        token = operator_stack.pop()
        if token.kind is not TokenKind.LEFT_PAREN:
            rpn.append(token)
    return tuple(rpn)
