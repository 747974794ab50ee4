from __future__ import annotations

import json
from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field, field_validator


class StepKind(str, Enum):
    PUSH_OPERAND = "push_operand"
    PUSH_MARKER = "push_marker"
    REDUCE_BINARY = "reduce_binary"
    WRAP_PAREN = "wrap_paren"
    IGNORE = "ignore"


class ParseStep(BaseModel):
    # index is None for reductions made by the final flush.
    index: int | None = Field(default=None, ge=0)
    char: str
    kind: StepKind
    operands: int = Field(ge=0)
    markers: list[str] = Field(default_factory=list)

    @field_validator("char")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("char must be a single character")
        return v


class ParseTrace(Protocol):
    def record(self, step: ParseStep) -> None: ...


class InMemoryTrace:
    """Collects parse steps in order; one instance per parse."""

    def __init__(self) -> None:
        self._steps: list[ParseStep] = []

    def record(self, step: ParseStep) -> None:
        self._steps.append(step)

    @property
    def steps(self) -> list[ParseStep]:
        return list(self._steps)

    def to_jsonl(self) -> str:
        return "".join(_jsonl_line(s) for s in self._steps)


def _jsonl_line(step: ParseStep) -> str:
    obj = step.model_dump(mode="json")
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False) + "\n"
