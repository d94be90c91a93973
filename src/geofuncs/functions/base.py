"""
Expression function contract.

Every function is invoked as `call(bindings, args)` where `args` is the ordered list
of already-evaluated, dynamically-typed argument values. A function returns either
its result or an `EvalError`; it never raises for bad input.

Argument values are classified once at the validation boundary into
`number | string | other` so each function checks kinds in a fixed order before
looking at ranges.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from math import inf, nan
from numbers import Real
from typing import Any, ClassVar, Literal, Mapping, Sequence

from geofuncs.domain.models import ErrorKind, EvalError, FunctionMetadata

logger = logging.getLogger(__name__)

ArgKind = Literal["number", "string", "other"]

ORDINALS = ("first", "second", "third", "fourth", "fifth")


def arg_kind(value: Any) -> ArgKind:
    """Classify an argument value. Booleans are not numbers."""
    if isinstance(value, bool):
        return "other"
    if isinstance(value, (Real, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "other"


def is_error(result: Any) -> bool:
    return isinstance(result, EvalError)


def to_float(value: Any) -> float:
    """Convert a "number" argument to a float.

    Integers beyond the double range become signed infinity so they fail the
    callers' range checks instead of raising. A signalling Decimal NaN becomes NaN.
    """
    try:
        return float(value)
    except OverflowError:
        return inf if value > 0 else -inf
    except ValueError:
        return nan


class Function:
    """Base class for expression functions.

    Subclasses set `metadata` and implement `evaluate`. `call` wraps `evaluate`
    so returned errors are logged in one place.
    """

    metadata: ClassVar[FunctionMetadata]

    @property
    def name(self) -> str:
        return self.metadata.name

    def call(self, bindings: Mapping[str, Any] | None, args: Sequence[Any]) -> Any:
        result = self.evaluate(bindings, list(args))
        if isinstance(result, EvalError):
            logger.debug("%s() returned %s", self.name, result)
        return result

    def evaluate(self, bindings: Mapping[str, Any] | None, args: list[Any]) -> Any:
        raise NotImplementedError

    def error(self, kind: ErrorKind, message: str) -> EvalError:
        return EvalError(kind=kind, message=message)

    def expects_number(self, position: int) -> EvalError:
        """Generic "Nth parameter must be a number" error used for leading numeric arguments."""
        return self.error("TypeError", f"{self.name}() expects a number as the {ORDINALS[position]} parameter")

    def expects_string(self, position: int) -> EvalError:
        return self.error("TypeError", f"{self.name}() expects a string as the {ORDINALS[position]} parameter")
