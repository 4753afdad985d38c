import pytest

from valormind.core.prompts import (
    AI_IDENTITY,
    IDENTITY_CLAUSE,
    SAFETY_INSTRUCTION,
    ConversationMode,
    get_system_prompt,
    resolve_mode,
)
from valormind.core.safety import SAFETY_MESSAGE


def test_therapist_prompt_is_personalized_and_carries_safety_instruction():
    prompt = get_system_prompt("therapist", "Amara")
    assert "Amara" in prompt
    assert "digital therapist" in prompt
    assert prompt.endswith(SAFETY_INSTRUCTION)
    assert SAFETY_MESSAGE in prompt


@pytest.mark.parametrize("mode", list(ConversationMode))
def test_every_mode_has_identity_clause_and_name(mode):
    prompt = get_system_prompt(mode, "Kofi")
    assert "Kofi" in prompt
    assert IDENTITY_CLAUSE in prompt
    assert AI_IDENTITY["name"] in prompt
    assert "{user_name}" not in prompt
    assert "CRITICAL SAFETY INSTRUCTION" in prompt


def test_modes_get_distinct_prompts():
    prompts = {get_system_prompt(mode, "X") for mode in ConversationMode}
    assert len(prompts) == len(ConversationMode)


def test_unknown_mode_falls_back_to_friend():
    assert get_system_prompt("unknown-mode", "X") == get_system_prompt("friend", "X")
    assert get_system_prompt(None, "X") == get_system_prompt(ConversationMode.FRIEND, "X")


def test_string_and_enum_modes_are_equivalent():
    assert get_system_prompt("avatar-therapy", "Zed") == get_system_prompt(ConversationMode.AVATAR_THERAPY, "Zed")


@pytest.mark.parametrize("name", [None, "", "   "])
def test_missing_name_uses_friend_placeholder(name):
    assert get_system_prompt("vent", name) == get_system_prompt("vent")
    assert "supporting Friend" in get_system_prompt("vent", name)


def test_prompt_is_deterministic():
    assert get_system_prompt("journal", "Amara") == get_system_prompt("journal", "Amara")


def test_name_with_braces_is_inserted_literally():
    assert "{weird}" in get_system_prompt("friend", "{weird}")


def test_resolve_mode():
    assert resolve_mode("vent") is ConversationMode.VENT
    assert resolve_mode(ConversationMode.JOURNAL) is ConversationMode.JOURNAL
    assert resolve_mode("nope") is ConversationMode.FRIEND
