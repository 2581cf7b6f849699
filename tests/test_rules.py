import pytest

from korean_keyfreq.analysis.keyword_frequency import KeywordPipeline
from korean_keyfreq.morph.suffix_rules import RuleTable, SuffixRule
from korean_keyfreq.rules import (
    KeywordRules,
    RuleConfigError,
    default_rules,
    dump_rules,
    load_rules,
    rules_from_mapping,
)


def write(tmp_path, content):
    path = tmp_path / "rules.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_dump_and_load_default_rules(tmp_path):
    path = dump_rules(default_rules(), tmp_path / "nested" / "rules.yaml")
    assert path.exists()
    assert load_rules(path) == default_rules()


def test_dump_and_load_custom_rules(tmp_path, minimal_rules):
    path = dump_rules(minimal_rules, tmp_path / "rules.yaml")
    assert load_rules(path) == minimal_rules


def test_partial_override_keeps_defaults(tmp_path):
    path = write(tmp_path, "stopwords: [사람]\nmin_length: 3\n")
    rules = load_rules(path)
    assert rules.stopwords == frozenset({"사람"})
    assert rules.min_length == 3
    assert rules.particles == default_rules().particles
    assert rules.function_nouns == default_rules().function_nouns


def test_empty_file_gives_defaults(tmp_path):
    assert load_rules(write(tmp_path, "")) == default_rules()


def test_string_particles_get_default_guard():
    rules = rules_from_mapping({"particles": ["에게", "이"]})
    assert list(rules.particles) == [SuffixRule("에게", 1), SuffixRule("이", 3)]


def test_mapping_particles_without_min_stem_get_default_guard():
    rules = rules_from_mapping({"particles": [{"suffix": "에게"}, {"suffix": "이"}]})
    assert list(rules.particles) == [SuffixRule("에게", 1), SuffixRule("이", 3)]
    assert KeywordPipeline(rules).process_token("고양이") == "고양이"


def test_particle_rule_without_stem_is_rejected():
    with pytest.raises(RuleConfigError, match="에게"):
        KeywordRules(particles=RuleTable([SuffixRule("에게", 0)]))


def test_string_predicate_endings_have_no_guard():
    rules = rules_from_mapping({"predicate_endings": ["한다", {"suffix": "다", "min_stem": 1}]})
    assert list(rules.predicate_endings) == [SuffixRule("한다", 0), SuffixRule("다", 1)]


def test_punctuation_override():
    rules = rules_from_mapping({"punctuation": "#@"})
    assert rules.punctuation == frozenset({"#", "@"})


@pytest.mark.parametrize(
    "content",
    [
        "unknown_key: 1\n",
        "particles: [는, 에게서는]\n",
        "particles: 에게\n",
        "particles: [{min_stem: 1}]\n",
        "particles: [{suffix: 이, min_stem: 하나}]\n",
        "particles: [{suffix: 에게, min_stem: 0}]\n",
        "stopwords: [1, 2]\n",
        "punctuation: [\".\"]\n",
        "min_length: 0\n",
        "min_length: true\n",
        "- 목록\n",
        "particles: [\n",
    ],
)
def test_invalid_rules_file(tmp_path, content):
    with pytest.raises(RuleConfigError):
        load_rules(write(tmp_path, content))


def test_missing_rules_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "missing.yaml")


def test_rule_config_error_is_value_error():
    with pytest.raises(ValueError):
        KeywordRules(min_length=0)
