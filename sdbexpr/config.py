"""
Evaluator configuration.

Values come from keyword arguments or from ``SDBEXPR_*`` environment
variables (see :meth:`EvaluatorConfig.from_env`).
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "SDBEXPR_"

# Bounds of the fixed token buffer used by the NEMU monitor.
REFERENCE_MAX_TOKENS = 32
REFERENCE_MAX_LITERAL_LENGTH = 31


class EvaluatorConfig(BaseModel):
    """Settings shared by the lexer and the evaluator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=32, description="Machine word width in bits")
    signed: bool = Field(default=False, description="Interpret words as two's complement")
    max_tokens: Optional[int] = Field(default=None, ge=1)
    max_literal_length: Optional[int] = Field(default=None, ge=1)
    enable_equality: bool = True
    log_level: str = "WARNING"

    @field_validator("width")
    @classmethod
    def validate_width(cls, value: int) -> int:
        if value not in (8, 16, 32, 64):
            raise ValueError(f"unsupported word width: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return value

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def wrap(self, value: int) -> int:
        """Reduce ``value`` to a machine word."""
        value &= self.mask
        if self.signed and value >> (self.width - 1):
            value -= 1 << self.width
        return value

    @classmethod
    def reference(cls, **overrides: Any) -> EvaluatorConfig:
        """Configuration with the monitor's fixed token buffer bounds."""
        values: dict[str, Any] = {
            "max_tokens": REFERENCE_MAX_TOKENS,
            "max_literal_length": REFERENCE_MAX_LITERAL_LENGTH,
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EvaluatorConfig:
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)


DEFAULT_CONFIG = EvaluatorConfig()
