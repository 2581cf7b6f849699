import pytest

from korean_keyfreq.morph.korean_rules import (
    DEFAULT_PARTICLES,
    DEFAULT_PREDICATE_ENDINGS,
    DEFAULT_STRONG_NOUN_SUFFIXES,
)
from korean_keyfreq.morph.suffix_rules import RuleConfigError, RuleTable, SuffixRule


def test_rule_min_stem_guard():
    rule = SuffixRule("이", 3)
    assert not rule.matches("나이")
    assert not rule.matches("고양이")
    assert rule.matches("대한민국이")


def test_rule_without_min_stem_matches_whole_word():
    assert SuffixRule("한다").matches("한다")
    assert not SuffixRule("한다", 1).matches("한다")


def test_first_matching_rule_wins():
    table = RuleTable.from_suffixes(["에게서는", "서는", "는"], min_stem=1)
    assert table.find("사람에게서는").suffix == "에게서는"
    assert table.find("학교에서는").suffix == "서는"
    assert table.find("사람") is None


def test_strip_removes_once():
    table = RuleTable.from_suffixes(["에서", "의"], min_stem=1)
    assert table.strip("자료에서의") == "자료에서"
    assert table.strip("사람") == "사람"


def test_shadowed_rule_is_rejected():
    with pytest.raises(RuleConfigError, match="에게서는"):
        RuleTable.from_suffixes(["는", "에게서는"])


def test_rule_with_larger_guard_does_not_shadow():
    table = RuleTable([SuffixRule("이", 3), SuffixRule("들이", 1)])
    assert table.strip("애들이") == "애"
    assert table.strip("대한민국이") == "대한민국"


def test_rule_with_equal_reach_is_shadowed():
    with pytest.raises(RuleConfigError, match="들이"):
        RuleTable([SuffixRule("이", 3), SuffixRule("들이", 2)])


def test_empty_suffix_is_rejected():
    with pytest.raises(RuleConfigError):
        RuleTable([SuffixRule("")])


def test_negative_min_stem_is_rejected():
    with pytest.raises(RuleConfigError):
        RuleTable([SuffixRule("이", -1)])


def test_duplicate_suffix_is_allowed():
    table = RuleTable.from_suffixes(["에는", "에는"])
    assert len(table) == 2


@pytest.mark.parametrize(
    "table", [DEFAULT_PARTICLES, DEFAULT_PREDICATE_ENDINGS, DEFAULT_STRONG_NOUN_SUFFIXES]
)
def test_default_tables_are_longest_first(table):
    lengths = [len(rule.suffix) for rule in table]
    assert lengths == sorted(lengths, reverse=True)


def test_table_equality():
    assert RuleTable.from_suffixes(["정책"]) == RuleTable.from_suffixes(["정책"])
    assert RuleTable.from_suffixes(["정책"]) != RuleTable.from_suffixes(["정책"], min_stem=1)
