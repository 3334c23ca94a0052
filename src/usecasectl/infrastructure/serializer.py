"""JSON encoding of use cases with schema validation on the way in.

``serialize`` is the right inverse of ``deserialize``: decoding an encoded
document yields an equal value, nested scenario, extension, and step
order included. The only values it rejects are those holding text with
no UTF-8 form (:class:`EncodeError`).

``deserialize`` separates three failure causes, in this order:

1. ``ValueError`` for ``None`` or blank input.
2. :class:`MalformedJsonError` when the text is not JSON.
3. :class:`SchemaValidationError` when the JSON does not match the
   bundled record schema, or :class:`DecodeError` when a schema-valid
   document still cannot be turned into a domain value.
"""

from __future__ import annotations

import functools
import json
import logging
from importlib import resources
from typing import Any

from jsonschema import Draft7Validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from usecasectl.domain.models import UseCase
from usecasectl.errors import DecodeError, EncodeError, MalformedJsonError, SchemaValidationError

logger = logging.getLogger(__name__)

SCHEMA_FILENAME = "use-case-schema.json"


@functools.cache
def load_schema() -> dict[str, Any]:
    """Load the bundled record schema (once per process)."""
    raw = resources.files("usecasectl").joinpath("schemas", SCHEMA_FILENAME).read_text(encoding="utf-8")
    schema: dict[str, Any] = json.loads(raw)
    Draft7Validator.check_schema(schema)
    return schema


def _format_violation(path: list[Any], message: str) -> str:
    location = "/".join(str(part) for part in path) or "$"
    return f"{location}: {message}"


class Serializer:
    """Encode and decode use-case records.

    The schema is treated as immutable for the lifetime of the instance.
    Pass *schema* only to substitute a different record schema in tests.
    """

    def __init__(self, schema: dict[str, Any] | None = None) -> None:
        self._validator = Draft7Validator(schema if schema is not None else load_schema())

    def serialize(self, use_case: UseCase) -> str:
        """Return the pretty-printed JSON record for *use_case*.

        Text that has no UTF-8 form (lone surrogates) raises
        :class:`EncodeError`.
        """
        if use_case is None:
            msg = "use_case cannot be None"
            raise ValueError(msg)
        try:
            return use_case.model_dump_json(by_alias=True, indent=2)
        except PydanticSerializationError as exc:
            msg = f"Failed to encode use case {use_case.id!r}: {exc}"
            raise EncodeError(msg) from exc

    def validate_schema(self, text: str) -> dict[str, Any]:
        """Parse *text* and check it against the record schema.

        Returns the parsed document. Every schema violation is reported,
        not just the first.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON format: {exc}"
            raise MalformedJsonError(msg) from exc

        violations = [
            _format_violation(list(err.absolute_path), err.message)
            for err in sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        ]
        if violations:
            msg = "Schema validation failed: " + "; ".join(violations)
            raise SchemaValidationError(msg, violations)
        return data

    def deserialize(self, text: str) -> UseCase:
        """Schema-check *text* and decode it into a :class:`UseCase`."""
        if text is None or not text.strip():
            msg = "JSON text cannot be None or empty"
            raise ValueError(msg)

        data = self.validate_schema(text)
        try:
            use_case = UseCase.model_validate(data)
        except PydanticValidationError as exc:
            msg = f"Failed to decode use case: {exc}"
            raise DecodeError(msg) from exc

        logger.debug("Decoded use case %s", use_case.id)
        return use_case
