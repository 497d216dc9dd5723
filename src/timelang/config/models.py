"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timelang.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from timelang.domain.render import RenderOptions

ClockSetting = Literal["preserve", "12h", "24h"]


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    clock: ClockSetting = "preserve"
    oxford_comma: bool = False

    def to_options(self) -> RenderOptions:
        return RenderOptions(clock=self.clock, oxford_comma=self.oxford_comma)


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    default_node: str = "expression"
    max_length: int = Field(default=512, gt=0)

    @field_validator("default_node")
    @classmethod
    def _known_node(cls, value: str) -> str:
        from timelang.grammar import NODE_NAMES

        if value not in NODE_NAMES:
            known = ", ".join(sorted(NODE_NAMES))
            raise ValueError(f"unknown node {value!r}; expected one of: {known}")
        return value
