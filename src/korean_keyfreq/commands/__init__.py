"""CLI 커맨드 모듈.

모든 커맨드는 Command 인터페이스를 구현하며, CLI에서 서브커맨드로 호출된다.
"""

from .analyze_command import AnalyzeCommand
from .base import Command
from .rules_command import RulesCommand
from .trace_command import TraceCommand

__all__ = [
    "Command",
    "AnalyzeCommand",
    "TraceCommand",
    "RulesCommand",
]
