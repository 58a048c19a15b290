"""Ordered lexer rules.

Rules are tried in table order at the current scan position and the first one
that matches there wins, even when a later rule would match more text.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional

from sdbexpr.errors import RuleCompileError
from sdbexpr.token import TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    regex: str
    token_type: TokenType


RULES: tuple[Rule, ...] = (
    Rule(r" +", TokenType.NoType),  # spaces
    Rule(r"\+", TokenType.Plus),
    Rule(r"-", TokenType.Minus),
    Rule(r"\*", TokenType.Mul),
    Rule(r"/", TokenType.Div),
    Rule(r"==", TokenType.Equal),
    Rule(r"[0-9]+", TokenType.Integer),
    Rule(r"\(", TokenType.LeftParen),
    Rule(r"\)", TokenType.RightParen),
)


class RuleTable:
    rules: tuple[Rule, ...]
    patterns: list[re.Pattern]

    def __init__(self, rules: tuple[Rule, ...] = RULES) -> None:
        self.rules = tuple(rules)
        self.patterns = []
        for rule in self.rules:
            try:
                self.patterns.append(re.compile(rule.regex))
            except re.error as exc:
                raise RuleCompileError(rule.regex, str(exc)) from exc

    def __len__(self) -> int:
        return len(self.rules)

    def match(self, text: str, position: int) -> Optional[tuple[int, TokenType]]:
        for index, pattern in enumerate(self.patterns):
            matched = pattern.match(text, position)
            if matched is None or matched.end() == position:
                continue
            length = matched.end() - position
            logger.debug(
                'match rules[%d] = "%s" at position %d with len %d: %s',
                index,
                self.rules[index].regex,
                position,
                length,
                matched.group(0),
            )
            return length, self.rules[index].token_type
        return None


# Rules are used many times, so they are compiled once at import.
DEFAULT_TABLE = RuleTable()
