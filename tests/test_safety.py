import pytest

from valormind.core.safety import (
    CRISIS_KEYWORDS,
    NORMALIZED_CRISIS_KEYWORDS,
    SAFETY_MESSAGE,
    normalize_text,
    perform_safety_check,
    screen_message,
)


@pytest.mark.parametrize("keyword", CRISIS_KEYWORDS)
def test_every_keyword_is_flagged(keyword):
    assert perform_safety_check(f"lately I feel like {keyword}, honestly") == SAFETY_MESSAGE


@pytest.mark.parametrize("text", [
    "I want to DIE today",
    "SUICIDE",
    "I'm feeling hopeless!!!",
    "(thinking about an overdose...)",
])
def test_matching_ignores_case_and_stripped_punctuation(text):
    assert perform_safety_check(text) == SAFETY_MESSAGE


@pytest.mark.parametrize("text", ["I cant go on", "I can't go on", "I can’t go on"])
def test_apostrophe_keyword_matches_with_or_without_apostrophe(text):
    assert perform_safety_check(text) == SAFETY_MESSAGE


@pytest.mark.parametrize("text", ["thoughts of self-harm", "self_harm again", "SELFHARM"])
def test_hyphenated_keyword_matches_after_normalization(text):
    assert perform_safety_check(text) == SAFETY_MESSAGE


def test_keyword_table_is_normalized_like_user_text():
    assert "cant go on" in NORMALIZED_CRISIS_KEYWORDS
    assert "selfharm" in NORMALIZED_CRISIS_KEYWORDS
    assert all(normalize_text(k) == k for k in NORMALIZED_CRISIS_KEYWORDS)


@pytest.mark.parametrize("text", [
    "",
    "I had a great day at school!",
    "Can you help me plan my week?",
    "I feel a bit tired but okay",
])
def test_clear_text_is_not_flagged(text):
    assert perform_safety_check(text) is None


def test_substring_match_is_not_word_bounded():
    assert perform_safety_check("reading articles about a caffeine overdose") == SAFETY_MESSAGE


def test_punctuation_is_deleted_not_replaced_with_space():
    assert normalize_text("End.My Life") == "endmy life"
    assert perform_safety_check("end.my life") is None


def test_screen_message_verdicts():
    flagged = screen_message("no reason to live")
    assert flagged.flagged is True
    assert flagged.message == SAFETY_MESSAGE

    clear = screen_message("hello there")
    assert clear.flagged is False
    assert clear.message is None


def test_check_is_deterministic():
    text = "I want to die"
    assert perform_safety_check(text) == perform_safety_check(text)
    assert perform_safety_check("hi") is perform_safety_check("hi") is None


def test_safety_message_lists_crisis_lines():
    assert "988" in SAFETY_MESSAGE
    assert "741741" in SAFETY_MESSAGE
    assert "1-866-488-7386" in SAFETY_MESSAGE
