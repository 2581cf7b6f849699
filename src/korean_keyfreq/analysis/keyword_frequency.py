"""키워드 빈도 집계 모듈.

텍스트를 공백 기준으로 분리하고 각 토큰을 정규화 → 조사 제거 → 용언 어미 검사 →
키워드 채택 순서로 처리한 뒤, 살아남은 단어의 출현 횟수를 센다.
결과는 빈도 내림차순이며 빈도가 같으면 처음 등장한 순서를 유지한다.
"""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import islice
from typing import Any

from tqdm import tqdm

from korean_keyfreq.morph.admission import AdmissionDecision, explain_admission
from korean_keyfreq.morph.normalizer import drop_ascii, looks_like_predicate, strip_particle
from korean_keyfreq.morph.punctuation import trim_punctuation
from korean_keyfreq.morph.script import ScriptClass, classify
from korean_keyfreq.rules import KeywordRules, default_rules
from korean_keyfreq.utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 256


@dataclass(frozen=True, slots=True)
class FrequencyEntry:
    """키워드와 출현 횟수."""

    word: str
    count: int

    def as_dict(self) -> dict[str, Any]:
        return {"word": self.word, "count": self.count}


@dataclass(frozen=True, slots=True)
class TokenTrace:
    """토큰 하나가 각 단계를 거치며 변한 기록.

    중간에 버려진 토큰은 이후 단계 필드가 None이다.
    """

    raw: str
    trimmed: str
    script: ScriptClass
    normalized: str | None = None
    stripped: str | None = None
    predicate: bool | None = None
    decision: AdmissionDecision | None = None

    @property
    def keyword(self) -> str | None:
        """최종 채택된 키워드. 제외되었으면 None."""
        if self.decision is not None and self.decision.accepted:
            return self.stripped
        return None


class KeywordPipeline:
    """규칙 묶음 하나로 구성된 키워드 추출 파이프라인.

    상태는 불변 규칙뿐이므로 여러 스레드에서 같은 인스턴스를 공유해도 된다.

    Attributes:
        rules: 사용할 규칙 묶음
    """

    def __init__(self, rules: KeywordRules | None = None) -> None:
        self.rules = rules or default_rules()

    def trace_token(self, raw: str) -> TokenTrace:
        """토큰 하나를 처리하면서 단계별 결과를 기록한다."""
        rules = self.rules
        trimmed = trim_punctuation(raw, rules.punctuation)
        script = classify(trimmed)
        if script is not ScriptClass.KOREAN:
            return TokenTrace(raw=raw, trimmed=trimmed, script=script)

        normalized = drop_ascii(trimmed)
        stripped = strip_particle(normalized, rules.particles)
        if looks_like_predicate(stripped, rules.predicate_endings):
            return TokenTrace(raw, trimmed, script, normalized, stripped, predicate=True)

        decision = explain_admission(stripped, rules)
        return TokenTrace(raw, trimmed, script, normalized, stripped, False, decision)

    def process_token(self, raw: str) -> str | None:
        """토큰을 키워드로 변환한다. 제외 대상이면 None."""
        return self.trace_token(raw).keyword

    def iter_keywords(self, text: str) -> Iterator[str]:
        """텍스트에서 채택된 키워드를 등장 순서대로 생성한다."""
        for raw in text.split():
            if (keyword := self.process_token(raw)) is not None:
                yield keyword

    def count(self, text: Any) -> Counter[str]:
        """텍스트의 키워드 빈도를 센다.

        Counter의 키 순서는 처음 등장한 순서이다. 문자열이 아니면 빈 Counter를 반환한다.
        """
        if not isinstance(text, str):
            return Counter()
        return Counter(self.iter_keywords(text))

    def analyze(self, text: Any) -> list[FrequencyEntry]:
        """텍스트의 키워드 빈도를 내림차순으로 반환한다."""
        counter = self.count(text)
        logger.debug("키워드 %d종 (총 %d회) 집계", len(counter), sum(counter.values()))
        return rank_counts(counter)


def rank_counts(counter: Counter[str]) -> list[FrequencyEntry]:
    """빈도 내림차순으로 정렬한다.

    sorted는 안정 정렬이므로 빈도가 같으면 Counter의 삽입 순서(처음 등장 순서)가 유지된다.
    """
    rows = sorted(counter.items(), key=lambda item: -item[1])
    return [FrequencyEntry(word, count) for word, count in rows]


def merge_counts(partials: Iterable[Counter[str]]) -> Counter[str]:
    """부분 집계를 순서대로 합친다.

    앞선 부분 집계에 먼저 등장한 키가 먼저 오므로, 순서대로 나눈 청크를 합치면
    전체 텍스트를 한 번에 센 것과 같은 키 순서가 된다.
    """
    merged: Counter[str] = Counter()
    for partial in partials:
        merged.update(partial)
    return merged


def analyze_frequency(text: Any, rules: KeywordRules | None = None) -> list[FrequencyEntry]:
    """텍스트의 키워드 빈도를 분석한다.

    Args:
        text: 분석할 텍스트 (문자열이 아니면 빈 결과)
        rules: 규칙 묶음 (None이면 기본 규칙)

    Returns:
        빈도 내림차순 키워드 목록
    """
    return KeywordPipeline(rules).analyze(text)


def analyze_texts(
    texts: Iterable[str],
    rules: KeywordRules | None = None,
    *,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    show_progress: bool = False,
) -> Counter[str]:
    """여러 텍스트를 청크로 나누어 병렬로 집계한다.

    청크 결과는 제출 순서대로 합치므로 workers 값과 무관하게 결과가 같다.

    Args:
        texts: 텍스트 스트림
        rules: 규칙 묶음 (None이면 기본 규칙)
        workers: 스레드 워커 수 (0 이하면 CPU 수)
        chunk_size: 청크당 텍스트 수 (0 이하면 DEFAULT_CHUNK_SIZE)
        show_progress: tqdm 진행바 표시 여부

    Returns:
        처음 등장 순서를 유지한 키워드 Counter
    """
    pipeline = KeywordPipeline(rules)
    if workers <= 0:
        workers = max(1, os.cpu_count() or 1)
    if chunk_size <= 0:
        chunk_size = DEFAULT_CHUNK_SIZE

    # 입력 스트림 청크 분할
    def chunk_iter(source: Iterable[str]) -> Iterator[list[str]]:
        iterator = iter(source)
        while True:
            chunk = list(islice(iterator, chunk_size))
            if not chunk:
                break
            yield chunk

    def count_chunk(chunk: list[str]) -> Counter[str]:
        counter: Counter[str] = Counter()
        for text in chunk:
            counter.update(pipeline.count(text))
        return counter

    logger.debug("집계 설정: workers=%d, chunk_size=%d", workers, chunk_size)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        partials = tqdm(
            executor.map(count_chunk, chunk_iter(texts)),
            desc="키워드 집계",
            unit="청크",
            disable=not show_progress,
        )
        return merge_counts(partials)
