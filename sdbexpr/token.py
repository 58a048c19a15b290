from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from sdbexpr.errors import ParseError


class TokenType(IntEnum):
    NoType = 256
    Equal = 257
    Integer = 258
    Plus = ord("+")
    Minus = ord("-")
    Mul = ord("*")
    Div = ord("/")
    LeftParen = ord("(")
    RightParen = ord(")")


PUNCTUATORS = {
    TokenType.Plus: "+",
    TokenType.Minus: "-",
    TokenType.Mul: "*",
    TokenType.Div: "/",
    TokenType.Equal: "==",
    TokenType.LeftParen: "(",
    TokenType.RightParen: ")",
}


@dataclass
class Token:
    kind: Optional[TokenType] = None
    expression: Optional[str] = None
    location: Optional[int] = None
    length: Optional[int] = None

    @property
    def text(self) -> str:
        if self.kind == TokenType.Integer:
            return self.expression
        return PUNCTUATORS[self.kind]


def new_token(
    token_type: Optional[TokenType] = None, start: int = 0, end: int = 0
) -> Token:
    return Token(token_type, None, start, end - start)


def get_number(
    token: Token, source: str = "", span: Optional[tuple[int, int]] = None
) -> int:
    if token.kind != TokenType.Integer:
        raise ParseError("expected number", source, token.location, span)
    return int(token.expression, 10)


def equal(token: Token, kind: TokenType) -> bool:
    return token.kind == kind
