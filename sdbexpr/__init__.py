from sdbexpr.config import EvaluatorConfig
from sdbexpr.errors import (
    CapacityError,
    DivisionByZeroError,
    ExpressionError,
    LexError,
    ParseError,
    RuleCompileError,
    UnsupportedOperatorError,
)
from sdbexpr.expr import evaluate_expression, expr
from sdbexpr.tokenize import dump_tokens, tokenize

__version__ = "0.1.0"
