# src/aistudio_exporter/parsers/json_parser.py

import json
import logging
from typing import Any

from pydantic import ValidationError

from aistudio_exporter.errors import MalformedInputError, ParseError

from .models import Root

logger = logging.getLogger(__name__)


def decode_root(data: Any) -> Root:
    """
    Convert an already-decoded JSON value into a Root.

    Missing or null fields fall back to their defaults and unknown
    fields are ignored.

    Raises:
        MalformedInputError: If the value is not an object, or if
            ``chunkedPrompt``/``chunks`` or a chunk field has the wrong type.
    """
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"expected a JSON object at top level, got {type(data).__name__}"
        )

    try:
        root = Root.model_validate(data)
    except ValidationError as exc:
        logger.debug("Export document failed validation: %s", exc)
        raise MalformedInputError("unexpected document shape", cause=exc) from exc

    logger.debug("Decoded %d chunks", len(root.chunked_prompt.chunks))
    return root


def parse_root(raw: bytes | str) -> Root:
    """
    Decode raw JSON input into a Root.

    Raises:
        ParseError: If the input is not valid JSON.
        MalformedInputError: If the JSON does not have the expected shape.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError("error parsing JSON", cause=exc) from exc

    return decode_root(data)
