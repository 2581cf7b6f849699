"""규칙 파일 내보내기 커맨드.

기본 규칙(또는 --rules로 읽은 규칙)을 YAML로 저장하여 도메인에 맞게 수정할 수 있게 한다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console

from korean_keyfreq.constants import RULES_FILE
from korean_keyfreq.parser import CliHelpFormatter
from korean_keyfreq.rules import dump_rules
from korean_keyfreq.utils.logging_config import get_logger

from .base import Command, SubparsersLike, resolve_rules

logger = get_logger(__name__)


class RulesCommand(Command):
    """규칙 파일 내보내기 커맨드."""

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("rules", help="규칙 YAML 파일 내보내기", formatter_class=CliHelpFormatter)
        parser.add_argument("--output", type=Path, default=RULES_FILE, help="규칙 파일 저장 경로")
        parser.add_argument("--rules", type=Path, default=None, help="기준으로 삼을 YAML 규칙 파일")
        parser.add_argument("--force", action="store_true", help="기존 파일이 있어도 덮어쓰기")

    def __init__(self, console: Console, output: Path, rules_path: Path | None, force: bool = False):
        self.console = console
        self.output = output
        self.rules_path = rules_path
        self.force = force

    def execute(self) -> dict[str, Any]:
        """규칙을 YAML로 저장한다.

        Raises:
            FileExistsError: 출력 파일이 이미 있고 force가 아닌 경우
        """
        if self.output.exists() and not self.force:
            raise FileExistsError(f"규칙 파일이 이미 있습니다 (--force로 덮어쓰기): {self.output}")

        rules = resolve_rules(self.rules_path)
        dump_rules(rules, self.output)
        logger.info("📏 규칙 파일 저장: %s", self.output)

        return {
            "rules_path": self.output,
            "particles": len(rules.particles),
            "predicate_endings": len(rules.predicate_endings),
            "strong_noun_suffixes": len(rules.strong_noun_suffixes),
            "stopwords": len(rules.stopwords),
            "function_nouns": len(rules.function_nouns),
        }

    def get_name(self) -> str:
        return "rules"
