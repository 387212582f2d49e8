"""Cleanup of raw oracle output.

Models like to wrap answers in markdown fences, add headings or bullet
commentary and finish with offers of further help. ``clean`` removes all of
that and keeps the remaining lines untouched, so list parsing downstream only
sees content lines. ``clean`` is idempotent.
"""
from __future__ import annotations
import re

# Un tag di linguaggio è una sola parola seguita da a capo
_FENCE_RE = re.compile(r"```(?:[\w+-]*[ \t]*\r?\n)?(.*?)```", re.DOTALL)

_MARKDOWN_MARKERS = ("#", "*", "-", ">")
_LABELS = ("note:", "design:")
_META_PHRASES = ("would you like", "do you want", "let me know")


def _unfence(match: re.Match) -> str:
    return match.group(1).strip()


def _is_meta_line(stripped: str) -> bool:
    if stripped.startswith(_MARKDOWN_MARKERS):
        return True
    lowered = stripped.lower()
    if lowered.startswith(_LABELS):
        return True
    if any(p in lowered for p in _META_PHRASES):
        return True
    return "I can" in stripped and "?" in stripped


def clean(raw_text: str | None) -> str:
    if not raw_text:
        return ""
    text = _FENCE_RE.sub(_unfence, raw_text)
    text = text.replace("`", "")
    kept = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if _is_meta_line(stripped):
            continue
        kept.append(line)
    return "\n".join(kept)


def first_line(raw_text: str | None) -> str:
    """First surviving line, without enclosing quotes or a trailing period.

    Used for answers that should be a single short name.
    """
    cleaned = clean(raw_text)
    if not cleaned:
        return ""
    line = cleaned.split("\n", 1)[0].strip()
    return line.strip("\"'“”").rstrip(".\"'“”").strip()
