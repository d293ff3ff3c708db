"""Shared helpers for the lookup modules.

This module centralizes the most repeated patterns:
- JSON-decoding a response body
- validating a decoded body against a wire model

It is internal to isspass and may change at any time.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from isspass._constants import BODY_EXCERPT_LIMIT
from isspass.exceptions import IssPassDecodeError

TModel = TypeVar("TModel", bound=BaseModel)


def excerpt(text: str) -> str:
    """Trim a body for inclusion in an error message."""
    if len(text) > BODY_EXCERPT_LIMIT:
        return f"{text[:BODY_EXCERPT_LIMIT]}…"
    return text


def decode_json(*, endpoint: str, text: str) -> Any:
    """Decode a response body, raising :class:`IssPassDecodeError` on bad JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise IssPassDecodeError(
            f"Invalid JSON from {endpoint}: {excerpt(text)}",
            endpoint=endpoint,
            body=text,
        ) from exc


def parse_model(model: type[TModel], *, endpoint: str, text: str) -> TModel:
    """Decode *text* and validate it as *model*."""
    payload = decode_json(endpoint=endpoint, text=text)
    if not isinstance(payload, dict):
        raise IssPassDecodeError(
            f"Expected a JSON object from {endpoint}, got {type(payload).__name__}",
            endpoint=endpoint,
            body=text,
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        raise IssPassDecodeError(
            f"Unexpected response shape from {endpoint} (fields: {fields}): {excerpt(text)}",
            endpoint=endpoint,
            body=text,
        ) from exc
