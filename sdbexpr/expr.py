import logging
from typing import Optional

from sdbexpr.config import DEFAULT_CONFIG, EvaluatorConfig
from sdbexpr.errors import CapacityError, ExpressionError
from sdbexpr.parse import Evaluator
from sdbexpr.tokenize import tokenize

logger = logging.getLogger(__name__)


def expr(expression: str, config: Optional[EvaluatorConfig] = None) -> int:
    """Evaluate ``expression`` and return its value as a machine word.

    Raises :class:`~sdbexpr.errors.ExpressionError` when the text cannot be
    tokenized or evaluated.
    """
    config = config or DEFAULT_CONFIG
    tokens = tokenize(expression, config)
    try:
        result = Evaluator(tokens, expression, config).evaluate()
    except RecursionError as exc:
        raise CapacityError("expression nested too deeply", expression) from exc
    logger.info("%s result is %d", expression, result)
    return result


def evaluate_expression(
    expression: str, config: Optional[EvaluatorConfig] = None
) -> tuple[int, bool]:
    """Debugger entry point: ``(value, success)`` without raising."""
    try:
        return expr(expression, config), True
    except ExpressionError as exc:
        logger.warning("%s", exc.diagnostic().rstrip("\n"))
        return 0, False
