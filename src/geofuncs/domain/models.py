"""
Domain models (Pydantic).

These types are the contract between the expression functions and whatever
invokes them (registry, CLI, API):
- `EvalError`: the error value a function returns instead of raising
- `FunctionMetadata`: static help/introspection data for a function
- `CallRequest` / `CallResponse`: JSON payloads for the HTTP API
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ErrorKind = Literal["ArityError", "TypeError", "ValueError", "RangeError"]


class EvalError(BaseModel):
    """An evaluation failure returned as a value.

    `kind` identifies the violated rule family; `message` is ready to show to a user.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class FunctionMetadata(BaseModel):
    """Static description of an expression function."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    params: str
    returns: Literal["string", "number"]


class CallRequest(BaseModel):
    """Positional arguments for a function call (JSON scalars or anything else)."""

    args: list[Any] = Field(default_factory=list)


class CallResponse(BaseModel):
    """Exactly one of `value` / `error` is set."""

    function: str
    value: str | float | None = None
    error: EvalError | None = None
