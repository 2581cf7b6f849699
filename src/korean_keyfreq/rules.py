"""키워드 추출 규칙 설정.

KeywordRules는 파이프라인이 사용하는 모든 규칙 데이터를 담는 불변 객체이다.
기본값은 morph.korean_rules 모듈에 있으며, YAML 파일로 일부 또는 전체를 덮어쓸 수 있다.

YAML 형식::

    punctuation: ".,!?"
    stopwords: [그리고, 하지만]
    function_nouns: [것, 수]
    particles:
      - 에게서는
      - {suffix: 이, min_stem: 3}
    predicate_endings: [한다, {suffix: 다, min_stem: 1}]
    strong_noun_suffixes: [정책, 성]
    min_length: 2
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from korean_keyfreq.morph import korean_rules
from korean_keyfreq.morph.punctuation import DEFAULT_PUNCTUATION
from korean_keyfreq.morph.suffix_rules import RuleConfigError, RuleTable, SuffixRule
from korean_keyfreq.utils.logging_config import get_logger

logger = get_logger(__name__)

__all__ = [
    "KeywordRules",
    "RuleConfigError",
    "default_rules",
    "dump_rules",
    "load_rules",
]


@dataclass(frozen=True)
class KeywordRules:
    """키워드 추출 규칙 묶음.

    Attributes:
        punctuation: 토큰 앞뒤에서 제거할 구두점 문자 집합
        stopwords: 불용어 집합 (정확히 일치하면 제외)
        function_nouns: 의미가 약한 기능 명사 집합 (정확히 일치하면 제외)
        particles: 조사 규칙 테이블
        predicate_endings: 용언/연결 어미 규칙 테이블
        strong_noun_suffixes: 강한 명사 접미사 규칙 테이블
        min_length: 키워드 최소 글자 수

    조사 규칙은 min_stem이 1 이상이어야 한다. 조사를 떼고 빈 문자열이 남는 일은 없다.
    """

    punctuation: frozenset[str] = DEFAULT_PUNCTUATION
    stopwords: frozenset[str] = korean_rules.STOPWORDS
    function_nouns: frozenset[str] = korean_rules.FUNCTION_NOUNS
    particles: RuleTable = field(default=korean_rules.DEFAULT_PARTICLES)
    predicate_endings: RuleTable = field(default=korean_rules.DEFAULT_PREDICATE_ENDINGS)
    strong_noun_suffixes: RuleTable = field(default=korean_rules.DEFAULT_STRONG_NOUN_SUFFIXES)
    min_length: int = korean_rules.MIN_KEYWORD_LENGTH

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise RuleConfigError(f"min_length는 1 이상이어야 합니다: {self.min_length}")
        for rule in self.particles:
            if rule.min_stem < 1:
                raise RuleConfigError(
                    f"조사 '{rule.suffix}' 규칙의 min_stem은 1 이상이어야 합니다: {rule.min_stem}"
                )


_DEFAULT_RULES = KeywordRules()


def default_rules() -> KeywordRules:
    """기본 규칙 묶음을 반환한다."""
    return _DEFAULT_RULES


# ---------------------------------------------------------------------------
# YAML 변환
# ---------------------------------------------------------------------------


def _parse_string_set(key: str, value: Any) -> frozenset[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RuleConfigError(f"'{key}'는 문자열 목록이어야 합니다.")
    return frozenset(value)


def _parse_rule_table(key: str, value: Any, *, default_min_stem: Any) -> RuleTable:
    """규칙 목록을 RuleTable로 변환한다.

    default_min_stem은 정수이거나 접미사를 받아 정수를 반환하는 함수이다.
    문자열 항목과 min_stem이 없는 매핑 항목 모두에 적용된다.
    """
    if not isinstance(value, list):
        raise RuleConfigError(f"'{key}'는 목록이어야 합니다.")

    def fallback(suffix: str) -> int:
        return default_min_stem(suffix) if callable(default_min_stem) else default_min_stem

    rules: list[SuffixRule] = []
    for index, item in enumerate(value):
        if isinstance(item, str):
            rules.append(SuffixRule(item, fallback(item)))
        elif isinstance(item, dict) and isinstance(item.get("suffix"), str):
            min_stem = item["min_stem"] if "min_stem" in item else fallback(item["suffix"])
            if not isinstance(min_stem, int) or isinstance(min_stem, bool):
                raise RuleConfigError(f"'{key}'[{index}]의 min_stem은 정수여야 합니다.")
            rules.append(SuffixRule(item["suffix"], min_stem))
        else:
            raise RuleConfigError(
                f"'{key}'[{index}]는 문자열 또는 {{suffix, min_stem}} 매핑이어야 합니다: {item!r}"
            )
    return RuleTable(rules)


def _particle_min_stem(suffix: str) -> int:
    if len(suffix) == 1:
        return korean_rules.SINGLE_PARTICLE_MIN_STEM
    return korean_rules.MULTI_PARTICLE_MIN_STEM


def rules_from_mapping(payload: dict[str, Any], base: KeywordRules | None = None) -> KeywordRules:
    """매핑에 있는 키만 기본 규칙 위에 덮어써서 새 규칙 묶음을 만든다.

    Raises:
        RuleConfigError: 알 수 없는 키가 있거나 값의 형식이 잘못된 경우
    """
    base = base or default_rules()
    known = {
        "punctuation",
        "stopwords",
        "function_nouns",
        "particles",
        "predicate_endings",
        "strong_noun_suffixes",
        "min_length",
    }
    if unknown := sorted(set(payload) - known):
        raise RuleConfigError(f"알 수 없는 규칙 키: {', '.join(unknown)}")

    overrides: dict[str, Any] = {}
    if "punctuation" in payload:
        if not isinstance(payload["punctuation"], str):
            raise RuleConfigError("'punctuation'은 문자열이어야 합니다.")
        overrides["punctuation"] = frozenset(payload["punctuation"])
    for key in ("stopwords", "function_nouns"):
        if key in payload:
            overrides[key] = _parse_string_set(key, payload[key])
    if "particles" in payload:
        overrides["particles"] = _parse_rule_table(
            "particles", payload["particles"], default_min_stem=_particle_min_stem
        )
    for key in ("predicate_endings", "strong_noun_suffixes"):
        if key in payload:
            overrides[key] = _parse_rule_table(key, payload[key], default_min_stem=0)
    if "min_length" in payload:
        min_length = payload["min_length"]
        if not isinstance(min_length, int) or isinstance(min_length, bool):
            raise RuleConfigError("'min_length'는 정수여야 합니다.")
        overrides["min_length"] = min_length

    return replace(base, **overrides)


def _table_to_list(table: Iterable[SuffixRule]) -> list[dict[str, Any]]:
    return [{"suffix": rule.suffix, "min_stem": rule.min_stem} for rule in table]


def rules_to_mapping(rules: KeywordRules) -> dict[str, Any]:
    """규칙 묶음을 YAML로 저장 가능한 매핑으로 변환한다."""
    return {
        "punctuation": "".join(sorted(rules.punctuation)),
        "stopwords": sorted(rules.stopwords),
        "function_nouns": sorted(rules.function_nouns),
        "particles": _table_to_list(rules.particles),
        "predicate_endings": _table_to_list(rules.predicate_endings),
        "strong_noun_suffixes": _table_to_list(rules.strong_noun_suffixes),
        "min_length": rules.min_length,
    }


def load_rules(path: Path) -> KeywordRules:
    """YAML 규칙 파일을 읽어 규칙 묶음을 만든다.

    파일에 없는 키는 기본값을 사용한다.

    Args:
        path: YAML 규칙 파일 경로

    Returns:
        규칙 묶음

    Raises:
        FileNotFoundError: 규칙 파일이 없는 경우
        RuleConfigError: YAML 형식이나 규칙 내용이 잘못된 경우
    """
    if not path.exists():
        raise FileNotFoundError(f"규칙 파일을 찾을 수 없습니다: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise RuleConfigError(f"{path} 파일을 YAML로 해석할 수 없습니다: {e}") from e

    if not isinstance(payload, dict):
        raise RuleConfigError(f"{path} 파일의 최상위는 매핑이어야 합니다.")

    rules = rules_from_mapping(payload)
    logger.info("📏 규칙 파일 로드: %s (%d개 키 적용)", path, len(payload))
    return rules


def dump_rules(rules: KeywordRules, path: Path) -> Path:
    """규칙 묶음을 YAML 파일로 저장한다."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(rules_to_mapping(rules), f, allow_unicode=True, sort_keys=False)
    return path
