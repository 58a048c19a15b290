import logging
from enum import IntEnum
from typing import Optional

from sdbexpr.config import DEFAULT_CONFIG, EvaluatorConfig
from sdbexpr.errors import (
    DivisionByZeroError,
    ParseError,
    UnsupportedOperatorError,
)
from sdbexpr.token import Token, TokenType, equal, get_number
from sdbexpr.tokenize import dump_tokens

logger = logging.getLogger(__name__)


class Parenthesization(IntEnum):
    NotWrapped = 0
    WrappedBalanced = 1
    WrappedUnbalanced = 2


# Lower binds looser. The main operator is the right-most one of the loosest tier.
PRECEDENCE = {
    TokenType.Equal: 0,
    TokenType.Plus: 1,
    TokenType.Minus: 1,
    TokenType.Mul: 2,
    TokenType.Div: 2,
}


class Evaluator:
    """Reduces one token sequence to a single machine word.

    The evaluator never builds a tree: every step works on an inclusive
    token range ``[p, q]`` and either strips a pair of enclosing
    parentheses or splits the range at its main operator.
    """

    tokens: list[Token]
    source: str
    config: EvaluatorConfig

    def __init__(
        self,
        tokens: list[Token],
        source: str = "",
        config: Optional[EvaluatorConfig] = None,
    ) -> None:
        self.tokens = tokens
        self.source = source
        self.config = config or DEFAULT_CONFIG

    def evaluate(self) -> int:
        self.check_balance()
        return self.eval(0, len(self.tokens) - 1)

    def location_of(self, index: int) -> int:
        if 0 <= index < len(self.tokens):
            return self.tokens[index].location
        return len(self.source)

    def check_balance(self) -> None:
        depth = 0
        for index, token in enumerate(self.tokens):
            if equal(token, TokenType.LeftParen):
                depth += 1
            elif equal(token, TokenType.RightParen):
                depth -= 1
                if depth < 0:
                    raise ParseError(
                        "unmatched ')'",
                        self.source,
                        token.location,
                        (0, len(self.tokens) - 1),
                    )
        if depth != 0:
            raise ParseError(
                "unmatched '('",
                self.source,
                len(self.source),
                (0, len(self.tokens) - 1),
            )

    def check_parentheses(self, p: int, q: int) -> Parenthesization:
        if q - p < 2:
            return Parenthesization.NotWrapped
        if not (
            equal(self.tokens[p], TokenType.LeftParen)
            and equal(self.tokens[q], TokenType.RightParen)
        ):
            return Parenthesization.NotWrapped
        depth = 0
        for i in range(p, q + 1):
            if equal(self.tokens[i], TokenType.LeftParen):
                depth += 1
            elif equal(self.tokens[i], TokenType.RightParen):
                depth -= 1
            # The opening parenthesis closes early, e.g. "(1)+(2)".
            if depth <= 0 and i != q:
                return Parenthesization.NotWrapped
        if depth != 0:
            return Parenthesization.WrappedUnbalanced
        return Parenthesization.WrappedBalanced

    def find_main_op(self, p: int, q: int) -> int:
        depth = 0
        index: Optional[int] = None
        for i in range(p, q + 1):
            token = self.tokens[i]
            if equal(token, TokenType.LeftParen):
                depth += 1
            if equal(token, TokenType.RightParen):
                depth -= 1
            if depth != 0 or i == q or token.kind not in PRECEDENCE:
                continue
            if equal(token, TokenType.Equal) and not self.config.enable_equality:
                raise UnsupportedOperatorError(
                    "equality is disabled", self.source, token.location, (p, q)
                )
            if (
                index is None
                or PRECEDENCE[self.tokens[index].kind] >= PRECEDENCE[token.kind]
            ):
                index = i
        if index is None:
            raise ParseError(
                "expected an operator", self.source, self.location_of(p), (p, q)
            )
        return index

    def eval(self, p: int, q: int) -> int:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("eval [%d, %d]: %s", p, q, dump_tokens(self.tokens, p, q))
        if p > q:
            raise ParseError(
                "expected an expression", self.source, self.location_of(p), (p, q)
            )
        if p == q:
            number = get_number(self.tokens[p], self.source, (p, q))
            return self.config.wrap(number)
        match self.check_parentheses(p, q):
            case Parenthesization.WrappedBalanced:
                return self.eval(p + 1, q - 1)
            case Parenthesization.WrappedUnbalanced:
                raise ParseError(
                    "unbalanced parentheses",
                    self.source,
                    self.location_of(p),
                    (p, q),
                )
        op = self.find_main_op(p, q)
        val1 = self.eval(p, op - 1)
        val2 = self.eval(op + 1, q)
        return self.apply(self.tokens[op], val1, val2, (p, q))

    def apply(self, op: Token, val1: int, val2: int, span: tuple[int, int]) -> int:
        match op.kind:
            case TokenType.Plus:
                return self.config.wrap(val1 + val2)
            case TokenType.Minus:
                return self.config.wrap(val1 - val2)
            case TokenType.Mul:
                return self.config.wrap(val1 * val2)
            case TokenType.Div:
                if val2 == 0:
                    raise DivisionByZeroError(self.source, op.location, span)
                quotient = abs(val1) // abs(val2)
                if (val1 < 0) != (val2 < 0):
                    quotient = -quotient
                return self.config.wrap(quotient)
            case TokenType.Equal:
                return int(val1 == val2)
        raise ParseError("invalid operator", self.source, op.location, span)
