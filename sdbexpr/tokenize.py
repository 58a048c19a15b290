import logging
from typing import Optional

from sdbexpr.config import DEFAULT_CONFIG, EvaluatorConfig
from sdbexpr.errors import CapacityError, LexError
from sdbexpr.rules import DEFAULT_TABLE, RuleTable
from sdbexpr.token import Token, TokenType, new_token

logger = logging.getLogger(__name__)


def tokenize(
    expression: str,
    config: Optional[EvaluatorConfig] = None,
    table: RuleTable = DEFAULT_TABLE,
) -> list[Token]:
    config = config or DEFAULT_CONFIG
    index = 0
    tokens = []
    while index < len(expression):
        matched = table.match(expression, index)
        if matched is None:
            raise LexError(expression, index)
        length, kind = matched
        if kind == TokenType.NoType:
            index += length
            continue
        if config.max_tokens is not None and len(tokens) >= config.max_tokens:
            raise CapacityError(
                f"too many tokens (limit {config.max_tokens})",
                expression,
                index,
                config.max_tokens,
            )
        current = new_token(kind, index, index + length)
        if kind == TokenType.Integer:
            if (
                config.max_literal_length is not None
                and length > config.max_literal_length
            ):
                raise CapacityError(
                    f"integer literal too long (limit {config.max_literal_length})",
                    expression,
                    index,
                    config.max_literal_length,
                )
            current.expression = expression[index : index + length]
        tokens.append(current)
        index += length
    return tokens


def dump_tokens(tokens: list[Token], p: int = 0, q: Optional[int] = None) -> str:
    """Serialize the inclusive range ``[p, q]`` back to compact text."""
    if q is None:
        q = len(tokens) - 1
    return "".join(token.text for token in tokens[p : q + 1])
