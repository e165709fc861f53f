"""
FastAPI dependency factories for typed request parameters.

Each factory returns a ``Depends`` object whose dependency declares one
raw text value (``Path``, ``Query``, ``Header``, ``Cookie`` or ``Form``),
binds it with the given parameter type and hands the route a
``TypedParameter``. The raw values are declared as optional strings, so
they show up in the OpenAPI document while all conversion and error
reporting stays with the parameter type. A missing value is bound as None.
Rejected values raise ``ParameterError``, which the centralized error
handler renders.

Example::

    @router.get("/items/{item_id}", responses=PARAMETER_ERROR_RESPONSES)
    def read_item(
        item_id: TypedParameter[int] = path_param(INT_PARAM, "item_id"),
        limit: TypedParameter[int] = query_param(INT_PARAM, "limit"),
    ) -> dict:
        ...
"""

import inspect
import logging
from typing import Any, Optional

from fastapi import Cookie, Depends, Form, Header, Path, Query

from typedparams.domain.params.entities import TypedParameter
from typedparams.domain.params.param_type import ParamType, bind_or_raise
from typedparams.interfaces.schemas import ErrorMessageSchema

logger = logging.getLogger(__name__)

# For route decorators: responses=PARAMETER_ERROR_RESPONSES
PARAMETER_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorMessageSchema, "description": "Invalid request parameter"},
}


def _describe(source: str, name: str, parameter_name: Optional[str]) -> str:
    return parameter_name if parameter_name is not None else f"{source} {name}"


def path_param(
    param_type: ParamType[Any], name: str, parameter_name: Optional[str] = None
) -> Any:
    """Bind the path parameter ``name``.

    FastAPI matches path parameters by argument name, so the dependency's
    signature is built with ``name`` as its only argument.
    """
    label = _describe("path param", name, parameter_name)

    def dependency(**values: str) -> TypedParameter[Any]:
        return bind_or_raise(param_type, values[name], label, logger)

    dependency.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        [
            inspect.Parameter(
                name, inspect.Parameter.KEYWORD_ONLY, default=Path(), annotation=str
            )
        ]
    )
    return Depends(dependency)


def query_param(
    param_type: ParamType[Any], name: str, parameter_name: Optional[str] = None
) -> Any:
    """Bind the query string parameter ``name``."""
    label = _describe("query param", name, parameter_name)

    def dependency(raw: Optional[str] = Query(None, alias=name)) -> TypedParameter[Any]:
        return bind_or_raise(param_type, raw, label, logger)

    return Depends(dependency)


def header_param(
    param_type: ParamType[Any], name: str, parameter_name: Optional[str] = None
) -> Any:
    """Bind the request header ``name`` (case-insensitive)."""
    label = _describe("header", name, parameter_name)

    def dependency(raw: Optional[str] = Header(None, alias=name)) -> TypedParameter[Any]:
        return bind_or_raise(param_type, raw, label, logger)

    return Depends(dependency)


def cookie_param(
    param_type: ParamType[Any], name: str, parameter_name: Optional[str] = None
) -> Any:
    """Bind the cookie ``name``."""
    label = _describe("cookie", name, parameter_name)

    def dependency(raw: Optional[str] = Cookie(None, alias=name)) -> TypedParameter[Any]:
        return bind_or_raise(param_type, raw, label, logger)

    return Depends(dependency)


def form_param(
    param_type: ParamType[Any], name: str, parameter_name: Optional[str] = None
) -> Any:
    """Bind the form field ``name``.

    Requires python-multipart. An empty field is bound as None.
    """
    label = _describe("form field", name, parameter_name)

    def dependency(raw: Optional[str] = Form(None, alias=name)) -> TypedParameter[Any]:
        return bind_or_raise(param_type, raw, label, logger)

    return Depends(dependency)
