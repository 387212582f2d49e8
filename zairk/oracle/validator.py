"""Ollama payload validation.

Validates requests before they leave and responses as soon as they arrive,
turning schema violations into ``OracleError``.
"""
import jsonschema
from .errors import OracleError
from .schema import CHAT_REQUEST_SCHEMA, CHAT_RESPONSE_SCHEMA


def validate_request(payload: dict):
    """Validate payload against the chat request schema."""
    jsonschema.validate(payload, CHAT_REQUEST_SCHEMA)
    return True


def validate_response(payload) -> str:
    """Validate a decoded chat response and return the completion text.

    Raises:
        OracleError: when the payload does not match the response schema
    """
    try:
        jsonschema.validate(payload, CHAT_RESPONSE_SCHEMA)
    except jsonschema.ValidationError as e:
        raise OracleError(f"Unexpected response shape from oracle: {e.message}") from e
    return payload["message"]["content"]
