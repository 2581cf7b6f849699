"""코퍼스 입력과 빈도 리포트 출력."""

from __future__ import annotations

import csv
import json
from collections.abc import Iterator, Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from korean_keyfreq.utils.logging_config import get_logger

from .keyword_frequency import FrequencyEntry

logger = get_logger(__name__)

ALLOWED_CORPUS_SUFFIXES = {".txt", ".jsonl", ".json"}
REPORT_SUFFIXES = (".parquet", ".csv", ".json")


def find_input_files(input_dir: Path | None, inputs: Sequence[Path]) -> list[Path]:
    """분석 대상 파일 목록을 수집한다."""
    files: list[Path] = []

    if input_dir is not None and input_dir.exists():
        for path in sorted(input_dir.rglob("*")):
            if path.is_file() and path.suffix.lower() in ALLOWED_CORPUS_SUFFIXES:
                files.append(path)

    for path in inputs:
        if path.is_file():
            files.append(path)
        else:
            logger.warning("입력 파일이 없어 건너뜁니다: %s", path)

    return sorted(set(files))


def _iter_json_record(record: object, text_key: str) -> Iterator[str]:
    if isinstance(record, dict) and text_key in record:
        value = record[text_key]
        if isinstance(value, str) and (text := value.strip()):
            yield text


def iter_texts(files: Sequence[Path], text_key: str, encoding: str) -> Iterator[str]:
    """파일에서 텍스트 스트림을 생성한다.

    .txt는 비어 있지 않은 줄 단위, .jsonl은 레코드의 text_key 값,
    .json은 리스트 또는 단일 객체의 text_key 값을 읽는다.
    해석할 수 없는 JSON은 경고를 남기고 건너뛴다.
    """
    for path in files:
        suffix = path.suffix.lower()
        if suffix == ".txt":
            with path.open("r", encoding=encoding) as handle:
                for line in handle:
                    if text := line.strip():
                        yield text
            continue

        if suffix == ".jsonl":
            with path.open("r", encoding=encoding) as handle:
                for line_no, line in enumerate(handle, 1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        record = json.loads(line)
                    except json.JSONDecodeError as exc:
                        logger.warning("%s:%d jsonl 라인을 해석할 수 없습니다: %s", path, line_no, exc)
                        continue
                    yield from _iter_json_record(record, text_key)
            continue

        if suffix == ".json":
            try:
                with path.open("r", encoding=encoding) as handle:
                    payload = json.load(handle)
            except json.JSONDecodeError as exc:
                logger.warning("%s 파일을 json으로 파싱할 수 없습니다: %s", path, exc)
                continue
            records = payload if isinstance(payload, list) else [payload]
            for record in records:
                yield from _iter_json_record(record, text_key)


def write_frequency_report(entries: Sequence[FrequencyEntry], output_path: Path) -> Path:
    """키워드 빈도를 확장자에 맞는 형식으로 저장한다.

    Args:
        entries: 빈도 내림차순 키워드 목록
        output_path: 저장 경로 (.parquet, .csv, .json)

    Returns:
        저장된 파일 경로

    Raises:
        ValueError: 지원하지 않는 확장자인 경우
    """
    suffix = output_path.suffix.lower()
    if suffix not in REPORT_SUFFIXES:
        raise ValueError(
            f"지원하지 않는 리포트 형식입니다: {output_path} (가능: {', '.join(REPORT_SUFFIXES)})"
        )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    ranks = list(range(1, len(entries) + 1))

    if suffix == ".parquet":
        table = pa.Table.from_pydict(
            {
                "rank": pa.array(ranks, type=pa.int64()),
                "word": pa.array([entry.word for entry in entries], type=pa.string()),
                "count": pa.array([entry.count for entry in entries], type=pa.int64()),
            }
        )
        pq.write_table(table, output_path)
    elif suffix == ".csv":
        with output_path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(["rank", "word", "count"])
            for rank, entry in zip(ranks, entries):
                writer.writerow([rank, entry.word, entry.count])
    else:
        with output_path.open("w", encoding="utf-8") as handle:
            json.dump([entry.as_dict() for entry in entries], handle, ensure_ascii=False, indent=2)

    logger.info("📄 키워드 빈도 저장: %s (%d개)", output_path, len(entries))
    return output_path


def read_frequency_parquet(path: Path) -> list[FrequencyEntry]:
    """parquet 리포트에서 키워드 빈도 목록을 읽는다."""
    table = pq.read_table(path, columns=["word", "count"])
    words: list[str] = table.column("word").to_pylist()
    counts: list[int] = table.column("count").to_pylist()
    return [FrequencyEntry(word, count) for word, count in zip(words, counts)]
