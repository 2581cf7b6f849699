"""keyfreq 명령줄 인자 정의.

공통 옵션(로그 레벨, 파일 로그)과 서브커맨드 등록, 정수 인자 검증기를 둔다.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from functools import partial
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel

if TYPE_CHECKING:
    from korean_keyfreq.commands.base import Command

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_EPILOG = """\
예시:
  keyfreq analyze data/corpora --top 30
  keyfreq trace 사람에게서는 발전하는 정책을
  keyfreq rules --output my_rules.yaml
"""


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본값을 함께 보여 주고 예시 블록의 줄바꿈을 그대로 두는 도움말 포맷터."""


class CliArgumentParser(argparse.ArgumentParser):
    """잘못된 인자를 Rich 패널로 알려 주는 파서.

    Attributes:
        console: 오류 패널을 출력할 콘솔
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console()
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        command = self.prog.split()[-1]
        hint = "keyfreq --help" if command == "keyfreq" else f"keyfreq {command} --help"
        self.console.print(
            Panel.fit(
                f"{message}\n\n[dim]사용법 확인: {hint}[/dim]",
                title="[bold red]잘못된 인자[/bold red]",
                border_style="red",
            )
        )
        raise SystemExit(2)


def bounded_int(minimum: int) -> Callable[[str], int]:
    """minimum 이상의 정수만 받아들이는 argparse type 함수를 만든다."""

    def parse(value: str) -> int:
        try:
            parsed = int(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f"정수가 아닙니다: {value!r}") from e
        if parsed < minimum:
            raise argparse.ArgumentTypeError(f"{minimum} 이상이어야 합니다: {parsed}")
        return parsed

    parse.__name__ = f"int>={minimum}"
    return parse


non_negative_int = bounded_int(0)
positive_int = bounded_int(1)


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """최상위 파서를 만들고 각 커맨드의 서브파서를 등록한다.

    Args:
        console: 인자 오류를 출력할 콘솔
        commands: configure_parser()를 가진 Command 서브클래스들

    Returns:
        구성된 파서
    """
    parser = CliArgumentParser(
        console,
        prog="keyfreq",
        description="형태소 분석기 없이 규칙만으로 한국어 명사 키워드 빈도를 계산합니다.",
        epilog=_EPILOG,
        formatter_class=CliHelpFormatter,
    )
    logging_group = parser.add_argument_group("로그")
    logging_group.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="콘솔과 파일 로그 레벨")
    logging_group.add_argument("--no-log-file", action="store_true", help="logs 디렉토리에 로그 파일을 만들지 않음")

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="<command>",
        parser_class=partial(CliArgumentParser, console),
    )
    for cmd_cls in commands:
        cmd_cls.configure_parser(subparsers)

    return parser
