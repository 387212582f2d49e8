"""JSON schema definitions for the Ollama chat API.

Defines the strict structure the adapter expects from ``/api/chat`` so that
schema drift is caught at the boundary instead of deep inside generation.
"""

CHAT_RESPONSE_SCHEMA_VERSION = 1

CHAT_MESSAGE_SCHEMA = {
    "type": "object",
    "required": ["role", "content"],
    "properties": {
        "role": {"type": "string", "enum": ["system", "user", "assistant", "tool"]},
        "content": {"type": "string"},
    },
}

CHAT_RESPONSE_SCHEMA = {
    "type": "object",
    "required": ["message", "done"],
    "properties": {
        "model": {"type": "string"},
        "created_at": {"type": "string"},
        "message": CHAT_MESSAGE_SCHEMA,
        "done": {"type": "boolean"},
        "done_reason": {"type": "string"},
        "total_duration": {"type": "integer", "minimum": 0},
        "load_duration": {"type": "integer", "minimum": 0},
        "prompt_eval_count": {"type": "integer", "minimum": 0},
        "prompt_eval_duration": {"type": "integer", "minimum": 0},
        "eval_count": {"type": "integer", "minimum": 0},
        "eval_duration": {"type": "integer", "minimum": 0},
    },
}

CHAT_REQUEST_SCHEMA = {
    "type": "object",
    "required": ["model", "messages", "stream"],
    "properties": {
        "model": {"type": "string", "minLength": 1},
        "messages": {"type": "array", "minItems": 1, "items": CHAT_MESSAGE_SCHEMA},
        "stream": {"type": "boolean", "const": False},
        "options": {
            "type": "object",
            "properties": {
                "temperature": {"type": "number", "minimum": 0.0, "maximum": 2.0},
                "num_predict": {"type": "integer", "minimum": 1},
            },
        },
    },
    "additionalProperties": False,
}
