"""Ollama HTTP client used as the text-generation oracle.

The generation pipeline only depends on the call contract
``llm_call(system, user, temperature, max_tokens) -> str``; ``OllamaClient.complete``
is the production implementation of that contract. Any transport or provider
failure is raised as ``OracleError``: world generation treats it as fatal.
"""
import logging
from typing import Callable, Optional
import requests
from .errors import OracleError
from .validator import validate_request, validate_response

# Contratto dell'oracolo: (system, user, temperature, max_tokens) -> testo
LLMCall = Callable[[str, str, float, int], str]


class OllamaClient:
    """Simple Ollama HTTP client for the ``/api/chat`` endpoint."""

    def __init__(self, base_url: str, model: str, timeout: float, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.http = session or requests.Session()

    @classmethod
    def from_config(cls) -> "OllamaClient":
        from config import get_ollama_base_url, get_ollama_model, get_ollama_timeout
        return cls(get_ollama_base_url(), get_ollama_model(), get_ollama_timeout())

    def is_available(self) -> bool:
        """Check if Ollama is running and reachable."""
        try:
            response = self.http.get(f"{self.base_url}/api/tags", timeout=min(2, self.timeout))
            return response.status_code == 200
        except requests.RequestException:
            return False

    def build_payload(self, system: str, user: str, temperature: float, max_tokens: int) -> dict:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "stream": False,
            "options": {
                "temperature": float(temperature),
                "num_predict": int(max_tokens),
            },
        }
        validate_request(payload)
        return payload

    def complete(self, system: str, user: str, temperature: float, max_tokens: int) -> str:
        """Return a single completion for the system/user prompt pair.

        Raises:
            OracleError: on connection errors, HTTP errors, non-JSON bodies
                or responses that do not match the chat response schema
        """
        payload = self.build_payload(system, user, temperature, max_tokens)
        try:
            response = self.http.post(f"{self.base_url}/api/chat", json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"Ollama request failed: {e}")
            raise OracleError(f"Could not reach Ollama at {self.base_url}: {e}") from e
        if response.status_code >= 400:
            raise OracleError(f"Ollama returned HTTP {response.status_code}: {response.text[:200]}")
        try:
            body = response.json()
        except ValueError as e:
            raise OracleError("Ollama returned a non-JSON body") from e
        text = validate_response(body)
        logging.debug(f"Oracle completion ({len(text)} chars, temperature={temperature})")
        return text

    __call__ = complete
