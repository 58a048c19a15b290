"""Errors raised while tokenizing or evaluating an expression.

Every fault the evaluator can hit is reported through :class:`ExpressionError`
so the debugger front end has a single thing to catch.
"""
from typing import Optional


def error_message(expression: str, location: int, message: str) -> str:
    """Render ``expression`` with a caret under column ``location``."""
    return f"{expression}\n{' ' * location}^ {message}\n"


class ExpressionError(Exception):
    def __init__(
        self, message: str, source: str = "", location: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.location = location

    def diagnostic(self) -> str:
        if self.location is None:
            return f"{self.source}\n{self.message}\n" if self.source else f"{self.message}\n"
        return error_message(self.source, self.location, self.message)


class RuleCompileError(ExpressionError):
    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"regex compilation failed: {reason}\n{pattern}")
        self.pattern = pattern


class LexError(ExpressionError):
    def __init__(self, source: str, position: int) -> None:
        super().__init__(f"no match at position {position}", source, position)
        self.position = position


class CapacityError(ExpressionError):
    def __init__(
        self,
        message: str,
        source: str = "",
        location: Optional[int] = None,
        limit: int = 0,
    ) -> None:
        super().__init__(message, source, location)
        self.limit = limit


class ParseError(ExpressionError):
    def __init__(
        self,
        message: str,
        source: str = "",
        location: Optional[int] = None,
        span: Optional[tuple[int, int]] = None,
    ) -> None:
        super().__init__(message, source, location)
        self.span = span


class UnsupportedOperatorError(ParseError):
    pass


class DivisionByZeroError(ExpressionError):
    def __init__(
        self,
        source: str = "",
        location: Optional[int] = None,
        span: Optional[tuple[int, int]] = None,
    ) -> None:
        super().__init__("division by zero", source, location)
        self.span = span
