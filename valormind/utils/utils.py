import json
import re
from typing import Any, Dict, Optional

SESSION_TITLE_MAX_CHARS = 50

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def session_title_from_message(content: str, max_chars: int = SESSION_TITLE_MAX_CHARS) -> str:
    """Title a chat session after its first user message"""
    if len(content) > max_chars:
        return content[:max_chars].strip() + "..."
    return content.strip()


def default_session_title(mode: str) -> str:
    return f"New {mode} chat"


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse the outermost {...} block in ``text``.

    Models often wrap JSON in prose or code fences. Returns None when nothing
    parses to a JSON object.
    """
    match = _JSON_OBJECT_RE.search(text or "")
    candidate = match.group(0) if match else text
    try:
        parsed = json.loads(candidate)
    except (TypeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None
