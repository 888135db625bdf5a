"""FastAPI dependencies: database sessions and declarative input validation."""

import json
from typing import Any, Callable, Dict, Generator, List, Sequence, Type, TypeVar

import pydantic
from fastapi import Depends, Request
from sqlmodel import Session, SQLModel

from private_markets.core.errors import ValidationError
from private_markets.db import Database
from private_markets.validation import FieldRule, check

SchemaT = TypeVar("SchemaT", bound=SQLModel)

_BODY_METHODS = ("POST", "PUT", "PATCH")


def get_database(request: Request) -> Database:
    """The process-scoped Database opened by the application lifespan."""
    return request.app.state.database


def get_session(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Get database session for FastAPI dependency injection.

    Does NOT auto-commit; domain operations commit their own writes.
    Rolls back on exception and always returns the connection to the pool.

    Usage in FastAPI routes:
        @router.get("/funds")
        def list_funds(session: Session = Depends(get_session)):
            return FundOperations.get_all(session)

    Yields:
        Session: Database session
    """
    with database.session() as session:
        yield session


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Parse the request body as a JSON object; an empty body reads as {}.

    Raises:
        ValidationError: If the body is not valid JSON or not an object
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        body = json.loads(raw)
    except ValueError:
        raise ValidationError("Malformed JSON body")

    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def validated(rules: Sequence[FieldRule]) -> Callable:
    """Build a dependency that validates body fields plus path parameters.

    Path parameters override body fields of the same name. The merged record
    is returned unchanged when every rule passes.

    Usage:
        @router.post("/investors", status_code=201)
        def create_investor(data: dict = Depends(validated(rules.CREATE_INVESTOR))):
            ...
    """
    rules = list(rules)

    async def dependency(request: Request) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if request.method in _BODY_METHODS:
            data.update(await read_json_body(request))
        data.update(request.path_params)

        check(rules, data)
        return data

    return dependency


def format_pydantic_errors(errors: Sequence[Dict[str, Any]]) -> List[str]:
    """Render pydantic error dicts as "<field> <message>" strings."""
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location} {error['msg']}".strip())
    return messages


def parse_input(schema: Type[SchemaT], data: Dict[str, Any]) -> SchemaT:
    """Convert a validated record into a typed input schema.

    Raises:
        ValidationError: If a value passes the field rules but cannot be
            converted (e.g. a fractional vintage year)
    """
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError("Validation failed", format_pydantic_errors(e.errors()))
