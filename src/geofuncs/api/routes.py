"""
API routes.

Endpoints:
- GET  `/api/functions`: metadata for every function.
- GET  `/api/functions/{name}`: metadata for one function.
- POST `/api/functions/{name}`: evaluate a function with positional `args`.

Evaluation errors are part of a successful response (`error` is set instead of
`value`); only an unknown function name is an HTTP error.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from geofuncs.domain.models import CallRequest, CallResponse, FunctionMetadata
from geofuncs.functions.base import Function, is_error
from geofuncs.functions.registry import describe_functions, get_function

router = APIRouter()


def _lookup(name: str) -> Function:
    try:
        return get_function(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown function: {name}") from None


@router.get("/api/functions", response_model=list[FunctionMetadata])
def list_functions() -> list[FunctionMetadata]:
    """Return metadata for all registered functions."""
    return describe_functions()


@router.get("/api/functions/{name}", response_model=FunctionMetadata)
def get_function_metadata(name: str) -> FunctionMetadata:
    return _lookup(name).metadata


@router.post("/api/functions/{name}", response_model=CallResponse)
def post_call(name: str, request: CallRequest) -> CallResponse:
    """Evaluate `name` with the request's positional arguments."""
    function = _lookup(name)
    result = function.call({}, request.args)
    if is_error(result):
        return CallResponse(function=name, error=result)
    return CallResponse(function=name, value=result)
