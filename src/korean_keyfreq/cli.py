"""korean-keyfreq CLI 진입점 모듈.

한국어 키워드 빈도 분석의 명령줄 인터페이스를 제공한다.
Rich 기반 콘솔 출력 및 로깅을 지원한다.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from functools import lru_cache
from pathlib import Path
from time import perf_counter
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from korean_keyfreq.commands import AnalyzeCommand, Command, RulesCommand, TraceCommand
from korean_keyfreq.parser import setup_parser
from korean_keyfreq.rules import RuleConfigError
from korean_keyfreq.utils.logging_config import get_console, get_logger, setup_logging

LOGGER_NAME = "korean_keyfreq.cli"

COMMANDS: tuple[type[Command], ...] = (AnalyzeCommand, TraceCommand, RulesCommand)

# Command registry for Factory pattern
_COMMAND_REGISTRY: dict[str, Callable[[argparse.Namespace, Console], Command]] = {}


def register_command(name: str) -> Callable:
    """커맨드 팩토리 함수를 레지스트리에 등록하는 데코레이터.

    Args:
        name: 커맨드 이름 (CLI 서브커맨드 이름)

    Returns:
        데코레이터 함수
    """
    def decorator(factory: Callable[[argparse.Namespace, Console], Command]) -> Callable:
        _COMMAND_REGISTRY[name] = factory
        return factory
    return decorator


@lru_cache(maxsize=1)
def _get_banner() -> str:
    """pyfiglet ASCII 아트 배너를 캐싱하여 반환한다."""
    from pyfiglet import Figlet
    return Figlet(font="standard").renderText("keyfreq").rstrip()


def print_banner(console: Console) -> None:
    """시작 배너를 출력한다."""
    console.print(Text(_get_banner(), style="bold cyan"))


@register_command("analyze")
def _create_analyze_command(a: argparse.Namespace, console: Console) -> AnalyzeCommand:
    """AnalyzeCommand 팩토리 함수."""
    return AnalyzeCommand(
        console, a.input_dir, a.inputs, a.output, a.rules,
        a.text_key, a.encoding, a.top, a.workers, a.chunk_size, a.max_texts
    )


@register_command("trace")
def _create_trace_command(a: argparse.Namespace, console: Console) -> TraceCommand:
    """TraceCommand 팩토리 함수."""
    return TraceCommand(console, [*a.text.split(), *a.words], a.rules)


@register_command("rules")
def _create_rules_command(a: argparse.Namespace, console: Console) -> RulesCommand:
    """RulesCommand 팩토리 함수."""
    return RulesCommand(console, a.output, a.rules, a.force)


def create_command(args: argparse.Namespace, console: Console) -> Command:
    """커맨드 객체를 생성한다.

    Raises:
        NotImplementedError: 유효하지 않은 커맨드인 경우
    """
    if factory := _COMMAND_REGISTRY.get(args.command):
        return factory(args, console)
    raise NotImplementedError(f"'{args.command}'는 유효하지 않은 커맨드입니다.")


def format_time(elapsed: float) -> str:
    """경과 시간을 사람이 읽기 쉬운 형태로 포맷팅한다.

    1초 미만은 밀리초, 1분 미만은 초, 그 이상은 분:초 형식으로 표시한다.
    """
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    if elapsed < 60:
        return f"{elapsed:.2f}초"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any) -> str:
    """결과 값을 포맷팅한다. 120자를 초과하면 잘라낸다."""
    formatters = {
        Path: str,
        dict: lambda v: f"dict({len(v)})",
        list: lambda v: f"list({len(v)})",
    }
    formatted = formatters.get(type(value), str)(value)
    return formatted[:117] + "..." if len(formatted) > 120 else formatted


def create_result_table(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """실행 결과 테이블을 생성한다."""
    table = Table(show_header=True, border_style="dim", padding=(0, 1))
    table.add_column("항목", style="bold cyan", width=25)
    table.add_column("값", style="yellow", justify="left")

    table.add_row("⏱️  실행 시간", format_time(elapsed))

    for key, value in result.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(f"   {formatted_key}", format_value(value))

    return Panel(
        table,
        title=f"[bold green]✅ {command_name} 완료[/bold green]",
        border_style="green",
        padding=(1, 2)
    )


# Error categorization strategy (Strategy pattern)
_ERROR_CATEGORIES = {
    NotImplementedError: ("미구현 기능", "⚠️", "미구현/미지원 오류"),
    FileNotFoundError: ("파일 없음", "📁", "파일 찾기 실패"),
    FileExistsError: ("파일 존재", "📁", "기존 파일 보호"),
    RuleConfigError: ("규칙 설정 오류", "📏", "규칙 설정 오류"),
    ValueError: ("입력값 오류", "⚠️", "입력값 오류"),
}


def handle_error(error: Exception, command: str, elapsed: float, logger: logging.Logger, console: Console) -> None:
    """에러를 처리하고 출력한다.

    에러 타입별로 카테고리와 아이콘을 선택한다. 분류되지 않은 예외는 traceback과 함께 기록한다.
    """
    error_type = type(error).__name__
    category, icon, log_msg = _ERROR_CATEGORIES.get(
        type(error), ("예기치 않은 오류", "❌", "실행 중 예기치 않은 오류 발생")
    )

    if type(error) in _ERROR_CATEGORIES:
        logger.error("[%s] %s: %s", command, log_msg, error)
    else:
        logger.exception("[%s] %s", command, log_msg)

    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")

    error_table.add_row("카테고리", f"{icon} {category}")
    error_table.add_row("오류 타입", error_type)
    error_table.add_row("메시지", str(error))
    error_table.add_row("경과 시간", format_time(elapsed))

    console.print()
    console.print(
        Panel(error_table, title=f"[bold red]❌ {command} 실행 실패[/bold red]",
              border_style="red", padding=(1, 2))
    )
    console.print()

    help_text = Text()
    help_text.append("💡 도움말: ", style="bold yellow")
    help_text.append(f"keyfreq {command} --help", style="cyan")
    help_text.append(" 명령으로 상세 옵션을 확인하세요", style="dim")
    console.print(help_text)
    console.print()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    Args:
        argv: 명령줄 인자 (None이면 sys.argv 사용)

    Returns:
        종료 코드 (0: 성공, 1: 오류, 130: 사용자 중단)
    """
    console = get_console()
    print_banner(console)
    args = setup_parser(console, COMMANDS).parse_args(argv)
    setup_logging(args.log_level, log_to_file=not args.no_log_file, console=console, file_prefix=args.command)
    logger = get_logger(LOGGER_NAME)
    start = perf_counter()

    try:
        command = create_command(args, console)
        command_name = command.get_name()
        logger.info("[%s] 단계 시작", command_name)
        result = command.execute()
        elapsed = perf_counter() - start

        logger.info("[%s] 단계 완료 (%.2fs)", command_name, elapsed)
        console.print(create_result_table(command_name, elapsed, result))
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(e, args.command, perf_counter() - start, logger, console)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
