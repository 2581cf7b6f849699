"""CLI 커맨드 추상 인터페이스.

모든 커맨드는 Command 추상 클래스를 상속받아 configure_parser(), execute(),
get_name()을 구현해야 한다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Protocol

from korean_keyfreq.rules import KeywordRules, default_rules, load_rules


class SubparsersLike(Protocol):
    """argparse 서브파서 액션 호환 프로토콜."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser:
        """서브커맨드 파서를 추가한다."""
        ...


def resolve_rules(rules_path: Path | None) -> KeywordRules:
    """--rules 옵션 값으로 규칙 묶음을 결정한다. 경로가 없으면 기본 규칙."""
    if rules_path is None:
        return default_rules()
    return load_rules(rules_path)


class Command(ABC):
    """CLI 서브커맨드 인터페이스."""

    @staticmethod
    @abstractmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        raise NotImplementedError

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드 실행 로직.

        Returns:
            실행 결과 딕셔너리 (결과 테이블 출력용)
        """
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        """커맨드 이름을 반환한다."""
        raise NotImplementedError
