"""순서 있는 접미사 규칙 테이블.

조사 제거, 용언 어미 판별, 강한 명사 접미사 판별이 모두 같은 평가기를 사용한다.
규칙은 선언된 순서대로 검사하며 처음 일치한 규칙 하나만 적용한다.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class RuleConfigError(ValueError):
    """규칙 테이블 또는 규칙 설정 파일이 잘못된 경우 발생한다."""


@dataclass(frozen=True, slots=True)
class SuffixRule:
    """접미사 규칙 하나.

    Attributes:
        suffix: 단어 끝에서 찾을 접미사
        min_stem: 접미사를 뗀 나머지가 가져야 하는 최소 글자 수
    """

    suffix: str
    min_stem: int = 0

    def matches(self, word: str) -> bool:
        """단어가 이 규칙에 해당하는지 확인한다."""
        return word.endswith(self.suffix) and len(word) - len(self.suffix) >= self.min_stem


def _shadows(earlier: SuffixRule, later: SuffixRule) -> bool:
    """later에 일치하는 모든 단어가 earlier에도 일치하는지 확인한다."""
    if earlier.suffix == later.suffix or not later.suffix.endswith(earlier.suffix):
        return False
    extra = len(later.suffix) - len(earlier.suffix)
    return later.min_stem + extra >= earlier.min_stem


class RuleTable:
    """순서가 의미를 가지는 접미사 규칙 목록.

    긴 접미사가 자신의 꼬리에 해당하는 짧은 접미사보다 먼저 와야 한다.
    예를 들어 "는"이 "에게서는"보다 앞에 있으면 "에게서는"으로 끝나는 단어는 모두
    "는"에 먼저 걸리므로 생성 시점에 RuleConfigError를 발생시킨다.
    앞선 규칙의 min_stem이 더 커서 일부 단어가 뒤 규칙에 도달할 수 있으면 허용한다
    (예: "이"(min_stem 3) 다음의 "들이"는 "애들이"를 처리한다).
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[SuffixRule]) -> None:
        self._rules: tuple[SuffixRule, ...] = tuple(rules)
        self._validate()

    @classmethod
    def from_suffixes(cls, suffixes: Iterable[str], min_stem: int = 0) -> RuleTable:
        """모든 규칙에 같은 min_stem을 적용하여 테이블을 만든다."""
        return cls(SuffixRule(suffix, min_stem) for suffix in suffixes)

    def _validate(self) -> None:
        for index, rule in enumerate(self._rules):
            if not rule.suffix:
                raise RuleConfigError(f"{index}번째 규칙의 접미사가 비어 있습니다.")
            if rule.min_stem < 0:
                raise RuleConfigError(f"'{rule.suffix}' 규칙의 min_stem은 0 이상이어야 합니다.")
            for earlier in self._rules[:index]:
                if _shadows(earlier, rule):
                    raise RuleConfigError(
                        f"'{rule.suffix}' 규칙이 앞선 '{earlier.suffix}' 규칙에 가려집니다. "
                        "긴 접미사를 먼저 배치하세요."
                    )

    def find(self, word: str) -> SuffixRule | None:
        """처음으로 일치하는 규칙을 반환한다. 없으면 None."""
        for rule in self._rules:
            if rule.matches(word):
                return rule
        return None

    def matches(self, word: str) -> bool:
        """일치하는 규칙이 하나라도 있는지 확인한다."""
        return self.find(word) is not None

    def strip(self, word: str) -> str:
        """처음 일치한 규칙의 접미사를 한 번만 제거한다."""
        rule = self.find(word)
        if rule is None:
            return word
        return word[: len(word) - len(rule.suffix)]

    @property
    def suffixes(self) -> tuple[str, ...]:
        return tuple(rule.suffix for rule in self._rules)

    def __iter__(self) -> Iterator[SuffixRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleTable):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({list(self.suffixes)!r})"
