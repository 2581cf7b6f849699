from __future__ import annotations

import pytest

from korean_keyfreq.morph.suffix_rules import RuleTable, SuffixRule
from korean_keyfreq.rules import KeywordRules


@pytest.fixture
def minimal_rules() -> KeywordRules:
    """테스트용 최소 규칙 묶음."""
    return KeywordRules(
        stopwords=frozenset({"그리고"}),
        function_nouns=frozenset({"경우"}),
        particles=RuleTable(
            [SuffixRule("에게서는", 1), SuffixRule("에게", 1), SuffixRule("이", 3)]
        ),
        predicate_endings=RuleTable(
            [SuffixRule("한다"), SuffixRule("한", 1), SuffixRule("다", 1)]
        ),
        strong_noun_suffixes=RuleTable.from_suffixes(["정책"]),
        min_length=2,
    )
