"""키워드 빈도 분석 커맨드.

코퍼스 파일에서 텍스트를 읽어 키워드 빈도를 집계하고 리포트로 저장한다.
"""

from __future__ import annotations

from itertools import islice
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from korean_keyfreq.analysis.corpus_io import find_input_files, iter_texts, write_frequency_report
from korean_keyfreq.analysis.keyword_frequency import DEFAULT_CHUNK_SIZE, analyze_texts, rank_counts
from korean_keyfreq.constants import CORPORA_DIR, KEYWORD_FREQUENCY_FILE
from korean_keyfreq.parser import CliHelpFormatter, non_negative_int, positive_int
from korean_keyfreq.utils.logging_config import get_logger

from .base import Command, SubparsersLike, resolve_rules

logger = get_logger(__name__)


class AnalyzeCommand(Command):
    """키워드 빈도 분석 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_dir: 코퍼스 입력 디렉토리
        inputs: 개별 입력 파일 목록
        output: 빈도 리포트 출력 경로 (.parquet, .csv, .json)
        rules_path: YAML 규칙 파일 경로 (None이면 기본 규칙)
        text_key: json/jsonl 텍스트 키
        encoding: 입력 파일 인코딩
        top: 콘솔에 표시할 상위 키워드 수
        workers: 스레드 워커 수 (0이면 CPU 수)
        chunk_size: 청크당 텍스트 수
        max_texts: 처리할 최대 텍스트 수 (0이면 전체)
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("analyze", help="코퍼스 키워드 빈도 분석", formatter_class=CliHelpFormatter)
        parser.add_argument("inputs", nargs="*", type=Path, help="개별 입력 파일 (.txt, .jsonl, .json)")
        parser.add_argument("--input-dir", type=Path, default=CORPORA_DIR, help="코퍼스 입력 디렉토리")
        parser.add_argument("--output", type=Path, default=KEYWORD_FREQUENCY_FILE, help="빈도 리포트 출력 경로")
        parser.add_argument("--rules", type=Path, default=None, help="YAML 규칙 파일 경로")
        parser.add_argument("--text-key", default="text", help="JSON/JSONL 파일에서 텍스트를 읽어올 키")
        parser.add_argument("--encoding", default="utf-8", help="입력 파일 인코딩")
        parser.add_argument("--top", type=positive_int, default=20, help="콘솔에 표시할 상위 키워드 수")
        parser.add_argument("--workers", type=non_negative_int, default=1, help="스레드 워커 수 (0이면 CPU 수)")
        parser.add_argument("--chunk-size", type=positive_int, default=DEFAULT_CHUNK_SIZE, help="청크당 텍스트 수")
        parser.add_argument("--max-texts", type=non_negative_int, default=0, help="처리할 최대 텍스트 수 (0이면 전체)")

    def __init__(
        self,
        console: Console,
        input_dir: Path | None,
        inputs: list[Path],
        output: Path,
        rules_path: Path | None,
        text_key: str = "text",
        encoding: str = "utf-8",
        top: int = 20,
        workers: int = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_texts: int = 0,
    ):
        self.console = console
        self.input_dir = input_dir
        self.inputs = inputs
        self.output = output
        self.rules_path = rules_path
        self.text_key = text_key
        self.encoding = encoding
        self.top = top
        self.workers = workers
        self.chunk_size = chunk_size
        self.max_texts = max_texts

    def execute(self) -> dict[str, Any]:
        """키워드 빈도 분석을 실행한다.

        Returns:
            분석 결과 딕셔너리 (frequency_path, input_files, total_keywords, unique_keywords)

        Raises:
            FileNotFoundError: 입력 파일을 찾을 수 없는 경우
        """
        rules = resolve_rules(self.rules_path)

        input_files = find_input_files(self.input_dir, self.inputs)
        if not input_files:
            raise FileNotFoundError(f"입력 파일을 찾을 수 없습니다: {self.input_dir}")
        logger.info("📂 입력 파일 %d개를 탐색했습니다.", len(input_files))

        texts = iter_texts(input_files, self.text_key, self.encoding)
        if self.max_texts > 0:
            texts = islice(texts, self.max_texts)
            logger.info("⚠️  최대 %d개 텍스트만 처리합니다.", self.max_texts)

        counter = analyze_texts(
            texts,
            rules,
            workers=self.workers,
            chunk_size=self.chunk_size,
            show_progress=True,
        )
        entries = rank_counts(counter)
        write_frequency_report(entries, self.output)

        total_keywords = sum(counter.values())
        unique_keywords = len(counter)
        logger.info("✅ 키워드 빈도 분석 완료")
        logger.info("  └─ 총 키워드: %d개", total_keywords)
        logger.info("  └─ 고유 키워드: %d개", unique_keywords)

        table = Table(title="✨ 키워드 빈도 분석 결과", show_header=True, title_style="bold green")
        table.add_column("항목", style="bold cyan", width=20)
        table.add_column("값", style="yellow", justify="right")
        table.add_row("입력 파일 수", f"{len(input_files):,}개")
        table.add_row("총 키워드 수", f"{total_keywords:,}개")
        table.add_row("고유 키워드 수", f"{unique_keywords:,}개")
        table.add_row("", "")
        table.add_row("빈도 파일", str(self.output))

        self.console.print()
        self.console.print(table)

        if top_entries := entries[: self.top]:
            top_table = Table(title=f"🏆 상위 {len(top_entries)}개 키워드", show_header=True, border_style="dim")
            top_table.add_column("순위", style="dim", width=6, justify="center")
            top_table.add_column("키워드", style="cyan")
            top_table.add_column("빈도", style="yellow", width=15, justify="right")

            for idx, entry in enumerate(top_entries, 1):
                rank_style = "bold green" if idx <= 3 else "dim"
                top_table.add_row(f"{idx}", entry.word, f"{entry.count:,}회", style=rank_style)

            self.console.print()
            self.console.print(top_table)

        self.console.print()

        return {
            "frequency_path": self.output,
            "input_files": len(input_files),
            "total_keywords": total_keywords,
            "unique_keywords": unique_keywords,
        }

    def get_name(self) -> str:
        return "analyze"
