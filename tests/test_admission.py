from dataclasses import replace

import pytest

from korean_keyfreq.morph.admission import AdmissionDecision, admit, explain_admission
from korean_keyfreq.rules import default_rules


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("그리고", AdmissionDecision.STOPWORD),
        ("등", AdmissionDecision.STOPWORD),
        ("집", AdmissionDecision.TOO_SHORT),
        ("것", AdmissionDecision.TOO_SHORT),
        ("경우", AdmissionDecision.FUNCTION_NOUN),
        ("교육정책", AdmissionDecision.STRONG_NOUN),
        ("안정성", AdmissionDecision.STRONG_NOUN),
        ("사람", AdmissionDecision.DEFAULT),
    ],
)
def test_explain_admission(word, expected):
    assert explain_admission(word, default_rules()) is expected


def test_admit_follows_decision():
    rules = default_rules()
    assert admit("부동산정책", rules)
    assert admit("사람", rules)
    assert not admit("그리고", rules)
    assert not admit("때", rules)


def test_min_length_is_configurable():
    rules = replace(default_rules(), min_length=3)
    assert explain_admission("사람", rules) is AdmissionDecision.TOO_SHORT
    assert explain_admission("대한민국", rules) is AdmissionDecision.DEFAULT


def test_minimal_rules(minimal_rules):
    assert explain_admission("그리고", minimal_rules) is AdmissionDecision.STOPWORD
    assert explain_admission("경우", minimal_rules) is AdmissionDecision.FUNCTION_NOUN
    assert explain_admission("교육정책", minimal_rules) is AdmissionDecision.STRONG_NOUN
    # 기본 규칙에서는 불용어지만 최소 규칙에는 없다
    assert explain_admission("하지만", minimal_rules) is AdmissionDecision.DEFAULT
