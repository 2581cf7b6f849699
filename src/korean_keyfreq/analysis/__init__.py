"""키워드 빈도 집계 및 코퍼스 입출력 모듈.

텍스트에서 키워드를 추출해 빈도를 집계하고, 코퍼스 파일을 읽어
빈도 리포트(parquet/csv/json)를 저장한다.
"""

from __future__ import annotations

from .corpus_io import find_input_files, iter_texts, write_frequency_report
from .keyword_frequency import (
    FrequencyEntry,
    KeywordPipeline,
    TokenTrace,
    analyze_frequency,
    analyze_texts,
    merge_counts,
    rank_counts,
)

__all__ = [
    "FrequencyEntry",
    "KeywordPipeline",
    "TokenTrace",
    "analyze_frequency",
    "analyze_texts",
    "find_input_files",
    "iter_texts",
    "merge_counts",
    "rank_counts",
    "write_frequency_report",
]
