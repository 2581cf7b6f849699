import pytest

from korean_keyfreq.morph.punctuation import trim_punctuation


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ('"(사람)"', "사람"),
        ("정책,", "정책"),
        ("<{[문제]}>!?", "문제"),
        ("...", ""),
        ("", ""),
        ("a.b", "a.b"),
        ("(사회.문화)", "사회.문화"),
        ("~사람~", "~사람~"),
    ],
)
def test_trim_punctuation(word, expected):
    assert trim_punctuation(word) == expected


@pytest.mark.parametrize("word", ['"(사람)"', "...", "a.b", "'정책'!", "", "!가!나!"])
def test_trim_is_idempotent(word):
    once = trim_punctuation(word)
    assert trim_punctuation(once) == once


def test_custom_punctuation_set():
    assert trim_punctuation("#태그#.", punctuation={"#"}) == "태그#."
