"""토큰 처리 과정 추적 커맨드.

입력 단어가 구두점 제거, 문자 체계 판별, 조사 제거, 용언 어미 검사,
키워드 채택 단계를 거치며 어떻게 바뀌는지 표로 보여준다. 규칙 파일을 조정할 때 사용한다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from korean_keyfreq.analysis.keyword_frequency import KeywordPipeline, TokenTrace
from korean_keyfreq.parser import CliHelpFormatter

from .base import Command, SubparsersLike, resolve_rules

_MISSING = "-"


def _describe_verdict(trace: TokenTrace) -> str:
    if trace.normalized is None:
        return "한글 아님"
    if trace.predicate:
        return "용언 어미"
    if trace.decision is None:
        return _MISSING
    return trace.decision.value


class TraceCommand(Command):
    """토큰 처리 과정 추적 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        tokens: 추적할 토큰 목록
        rules_path: YAML 규칙 파일 경로 (None이면 기본 규칙)
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("trace", help="토큰별 처리 단계 추적", formatter_class=CliHelpFormatter)
        parser.add_argument("words", nargs="*", help="추적할 단어")
        parser.add_argument("--text", default="", help="공백으로 분리하여 추적할 텍스트")
        parser.add_argument("--rules", type=Path, default=None, help="YAML 규칙 파일 경로")

    def __init__(self, console: Console, tokens: list[str], rules_path: Path | None):
        self.console = console
        self.tokens = tokens
        self.rules_path = rules_path

    def execute(self) -> dict[str, Any]:
        """각 토큰의 단계별 결과를 표로 출력한다.

        Raises:
            ValueError: 추적할 토큰이 없는 경우
        """
        if not self.tokens:
            raise ValueError("추적할 단어나 --text를 입력하세요.")

        pipeline = KeywordPipeline(resolve_rules(self.rules_path))
        traces = [pipeline.trace_token(token) for token in self.tokens]

        table = Table(title="🔍 토큰 처리 과정", show_header=True, title_style="bold green")
        table.add_column("토큰", style="bold")
        table.add_column("구두점 제거")
        table.add_column("문자 체계", style="dim")
        table.add_column("조사 제거", style="cyan")
        table.add_column("판정")
        table.add_column("키워드", style="bold green")

        for trace in traces:
            table.add_row(
                trace.raw,
                trace.trimmed or _MISSING,
                trace.script.value,
                trace.stripped or _MISSING,
                _describe_verdict(trace),
                trace.keyword or _MISSING,
            )

        self.console.print()
        self.console.print(table)
        self.console.print()

        return {
            "tokens": len(traces),
            "keywords": sum(1 for trace in traces if trace.keyword is not None),
        }

    def get_name(self) -> str:
        return "trace"
