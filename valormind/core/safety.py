"""
First-line crisis screening for user-authored chat text.

The screen runs before any request reaches the language model. A match
short-circuits the chat pipeline and the fixed SAFETY_MESSAGE is returned
instead of a model reply. The persona system prompt repeats the same
instruction model-side (see valormind.core.prompts).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

SAFETY_MESSAGE = """
It sounds like you are going through a very difficult time. Please know that your life is valuable and there is help available.
If you are in immediate danger, please call 911 or your local emergency number.
You can also reach out to a crisis hotline for free, confidential support, 24/7. Here are some options:
- **Crisis Text Line:** Text HOME to 741741
- **National Suicide Prevention Lifeline:** Call or text 988
- **The Trevor Project (for LGBTQ youth):** 1-866-488-7386
Please reach out to one of these resources. They are there to help you. ❤️
"""

# Deleted, not replaced with a space, so "end.my life" becomes "endmy life".
STRIPPED_PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()'’"

_STRIP_TABLE = str.maketrans("", "", STRIPPED_PUNCTUATION)

CRISIS_KEYWORDS: Tuple[str, ...] = (
    "kill myself",
    "suicide",
    "suicidal",
    "end my life",
    "want to die",
    "can't go on",
    "hopeless",
    "no reason to live",
    "self-harm",
    "cutting myself",
    "overdose",
    "hang myself",
    "shoot myself",
)


def normalize_text(text: str) -> str:
    """Lowercase ``text`` and delete every character in STRIPPED_PUNCTUATION."""
    return text.lower().translate(_STRIP_TABLE)


# Keywords go through the same normalization as user text, otherwise
# "can't go on" and "self-harm" could never match.
NORMALIZED_CRISIS_KEYWORDS: Tuple[str, ...] = tuple(normalize_text(k) for k in CRISIS_KEYWORDS)


@dataclass(frozen=True)
class SafetyVerdict:
    flagged: bool
    message: Optional[str] = None


def perform_safety_check(text: str) -> Optional[str]:
    """
    Return SAFETY_MESSAGE if ``text`` contains a crisis keyword, else None.

    Matching is plain substring containment on the normalized text, so a
    keyword embedded in a longer word or phrase still counts.
    """
    normalized = normalize_text(text or "")
    for keyword in NORMALIZED_CRISIS_KEYWORDS:
        if keyword in normalized:
            return SAFETY_MESSAGE
    return None


def screen_message(text: str) -> SafetyVerdict:
    message = perform_safety_check(text)
    return SafetyVerdict(flagged=message is not None, message=message)
