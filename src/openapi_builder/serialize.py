"""JSON encoding and decoding for OpenAPI object models."""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .json_types import JSONObject, RawJSON

logger = logging.getLogger(__name__)

DEFAULT_INDENT: Optional[int] = 2

ModelT = TypeVar("ModelT", bound=BaseModel)


class EncodeError(RuntimeError):
    """Raised when a model cannot be rendered as JSON."""


class DecodeError(RuntimeError):
    """Raised when input does not decode into the requested model."""


def to_dict(model: BaseModel) -> dict[str, Any]:
    """Render a model as a JSON-compatible mapping keyed by OpenAPI names.

    Args:
        model (BaseModel): Model to render.

    Returns:
        dict[str, Any]: Mapping with unset optional fields left out.

    Raises:
        EncodeError: If a value has no JSON representation.
    """
    try:
        payload = model.model_dump(mode="json", by_alias=True)
    except PydanticSerializationError as exc:
        raise EncodeError(f"Failed to encode {type(model).__name__}: {exc}") from exc
    if not isinstance(payload, dict):
        raise EncodeError(
            f"{type(model).__name__} must encode to a mapping, got {type(payload)!r}"
        )
    return payload


def to_json(model: BaseModel, *, indent: Optional[int] = DEFAULT_INDENT) -> str:
    """Render a model as JSON text.

    Args:
        model (BaseModel): Model to render.
        indent (Optional[int]): Spaces per nesting level, or ``None`` for
            compact single-line output.

    Returns:
        str: The JSON document.

    Raises:
        EncodeError: If a value has no JSON representation.
    """
    try:
        text = model.model_dump_json(by_alias=True, indent=indent)
    except PydanticSerializationError as exc:
        raise EncodeError(f"Failed to encode {type(model).__name__}: {exc}") from exc
    logger.debug("Encoded %s as %d characters of JSON", type(model).__name__, len(text))
    return text


def to_json_bytes(model: BaseModel, *, indent: Optional[int] = DEFAULT_INDENT) -> bytes:
    """Render a model as UTF-8 encoded JSON."""
    return to_json(model, indent=indent).encode("utf-8")


def from_json(model_type: type[ModelT], data: RawJSON) -> ModelT:
    """Decode JSON text or bytes into ``model_type``.

    Args:
        model_type (type[ModelT]): Model class to populate.
        data (RawJSON): JSON document.

    Returns:
        ModelT: The populated model.

    Raises:
        DecodeError: If the input is not JSON or does not match the model shape.
    """
    try:
        model = model_type.model_validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Failed to decode {model_type.__name__} from JSON: {exc}") from exc
    logger.debug("Decoded %s from %d characters of JSON", model_type.__name__, len(data))
    return model


def from_dict(model_type: type[ModelT], payload: JSONObject) -> ModelT:
    """Decode an already-parsed JSON mapping into ``model_type``.

    Raises:
        DecodeError: If the mapping does not match the model shape.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"{model_type.__name__} must decode from a mapping, got {type(payload)!r}"
        )
    try:
        return model_type.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Failed to decode {model_type.__name__}: {exc}") from exc
