"""Tests for evaluator configuration."""

import pytest
from pydantic import ValidationError

from sdbexpr.config import EvaluatorConfig


def test_defaults():
    config = EvaluatorConfig()
    assert config.width == 32
    assert config.signed is False
    assert config.max_tokens is None
    assert config.enable_equality is True
    assert config.mask == 0xFFFFFFFF


def test_reference_bounds():
    config = EvaluatorConfig.reference(width=64)
    assert config.max_tokens == 32
    assert config.max_literal_length == 31
    assert config.width == 64


def test_wrap():
    assert EvaluatorConfig().wrap(-1) == 0xFFFFFFFF
    assert EvaluatorConfig(signed=True).wrap(0xFFFFFFFF) == -1
    assert EvaluatorConfig(width=16, signed=True).wrap(0x8000) == -0x8000


def test_from_env():
    config = EvaluatorConfig.from_env(
        {
            "SDBEXPR_WIDTH": "16",
            "SDBEXPR_SIGNED": "true",
            "SDBEXPR_MAX_TOKENS": "8",
            "SDBEXPR_LOG_LEVEL": "debug",
            "SDBEXPR_ENABLE_EQUALITY": "",
            "UNRELATED": "1",
        }
    )
    assert config.width == 16
    assert config.signed is True
    assert config.max_tokens == 8
    assert config.log_level == "DEBUG"
    assert config.enable_equality is True


@pytest.mark.parametrize(
    "values",
    [{"width": 12}, {"max_tokens": 0}, {"log_level": "loud"}, {"colour": "red"}],
)
def test_invalid(values):
    with pytest.raises(ValidationError):
        EvaluatorConfig(**values)


def test_invalid_env():
    with pytest.raises(ValidationError):
        EvaluatorConfig.from_env({"SDBEXPR_WIDTH": "wide"})


def test_frozen():
    with pytest.raises(ValidationError):
        EvaluatorConfig().width = 64
