"""Text-generation oracle: Ollama client, payload schema and validation."""

from .errors import OracleError
from .llm_adapter import LLMCall, OllamaClient
from .validator import validate_request, validate_response

__all__ = [
    'OracleError', 'LLMCall', 'OllamaClient',
    'validate_request', 'validate_response',
]
