"""Configurazione centrale per zAIrk.

Qui centralizziamo i parametri modificabili della generazione del mondo e del
client Ollama (stanze, probabilità degli oggetti, inventario, seed, mappa).
Tutti i valori hanno un default sensato e possono essere sovrascritti via
variabili d'ambiente.
"""
from __future__ import annotations
import os


def _get_int_env(name: str, default: int, minval: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_float_env(name: str, default: float, minval: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = float(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in {"1", "true", "yes", "on"}


def _get_chance_env(name: str, default: float) -> float:
    # Probabilità: sempre nell'intervallo [0, 1]
    val = _get_float_env(name, default, minval=0.0)
    return max(0.0, min(1.0, val))


__all__ = [
    # Ollama
    "get_ollama_base_url", "get_ollama_model", "get_ollama_timeout",
    # Generazione mondo
    "get_theme", "get_room_count", "get_max_inventory_size", "get_max_items_per_room",
    "get_filler_chance", "get_pickable_chance", "get_extracted_pickable_chance",
    "get_validate_extracted", "get_seed",
    # CLI
    "get_map_file", "get_log_level",
]


# ---------------- Ollama (oracolo testuale) ----------------

def get_ollama_base_url() -> str:
    """Base URL del server Ollama. Var: ZK_OLLAMA_BASE_URL (default http://localhost:11434)."""
    return os.getenv("ZK_OLLAMA_BASE_URL", "http://localhost:11434").strip().rstrip("/")


def get_ollama_model() -> str:
    """Nome modello Ollama da usare (es. 'llama3.2:3b'). Var: ZK_OLLAMA_MODEL."""
    return os.getenv("ZK_OLLAMA_MODEL", "llama3.2:3b").strip()


def get_ollama_timeout() -> float:
    """Timeout richieste HTTP in secondi. Var: ZK_OLLAMA_TIMEOUT (default 60.0).

    La generazione di liste lunghe con modelli locali può essere lenta, quindi
    il default è molto più alto di quello usato per i dialoghi brevi.
    """
    return _get_float_env("ZK_OLLAMA_TIMEOUT", 60.0, minval=1.0)


# ---------------- Generazione mondo ----------------

def get_theme() -> str:
    """Tema di default del mondo. Var: ZK_THEME (default 'fantasy')."""
    return os.getenv("ZK_THEME", "fantasy").strip() or "fantasy"


def get_room_count() -> int:
    """Numero di stanze da generare. Var: ZK_ROOM_COUNT (default 10, minimo 2)."""
    return _get_int_env("ZK_ROOM_COUNT", 10, minval=2)


def get_max_inventory_size() -> int:
    """Capacità dell'inventario (numero di oggetti). Var: ZK_MAX_INVENTORY (default 10)."""
    return _get_int_env("ZK_MAX_INVENTORY", 10, minval=1)


def get_max_items_per_room() -> int:
    """Tetto di oggetti per stanza dopo l'estrazione. Var: ZK_MAX_ITEMS_PER_ROOM (default 2)."""
    return _get_int_env("ZK_MAX_ITEMS_PER_ROOM", 2, minval=1)


def get_filler_chance() -> float:
    """Probabilità di un oggetto generico in una stanza vuota. Var: ZK_FILLER_CHANCE (default 0.25)."""
    return _get_chance_env("ZK_FILLER_CHANCE", 0.25)


def get_pickable_chance() -> float:
    """Probabilità che un oggetto generico sia raccoglibile. Var: ZK_PICKABLE_CHANCE (default 0.8)."""
    return _get_chance_env("ZK_PICKABLE_CHANCE", 0.8)


def get_extracted_pickable_chance() -> float:
    """Come sopra, per oggetti estratti dalle descrizioni. Var: ZK_EXTRACTED_PICKABLE_CHANCE (default 0.7)."""
    return _get_chance_env("ZK_EXTRACTED_PICKABLE_CHANCE", 0.7)


def get_validate_extracted() -> bool:
    """Conferma via oracolo degli oggetti estratti. Var: ZK_VALIDATE_EXTRACTED (default True)."""
    return _get_bool_env("ZK_VALIDATE_EXTRACTED", True)


def get_seed() -> int | None:
    """Seed per la generazione deterministica. Var: ZK_SEED (default: nessuno)."""
    raw = os.getenv("ZK_SEED")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


# ---------------- CLI ----------------

def get_map_file() -> str:
    """Percorso del file mappa esportato. Var: ZK_MAP_FILE (stringa vuota = nessun export)."""
    return os.getenv("ZK_MAP_FILE", "zairk_map.txt").strip()


def get_log_level() -> str:
    """Livello di logging. Var: ZK_LOG_LEVEL (default WARNING)."""
    level = os.getenv("ZK_LOG_LEVEL", "WARNING").strip().upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return "WARNING"
    return level
