"""keyfreq 로깅 구성.

콘솔은 RichHandler, 파일은 실행마다 새로 만드는 타임스탬프 로그를 쓴다.
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from korean_keyfreq.constants import LOGS_DIR

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"

_CONSOLE = Console(stderr=False)


def get_console() -> Console:
    """로그와 결과 표를 함께 찍는 공용 콘솔."""
    return _CONSOLE


def _open_log_file(log_dir: Path, prefix: str) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"{prefix}_{stamp}.log"


def setup_logging(
    level: int | str = "INFO",
    log_to_file: bool = True,
    log_dir: Path | None = None,
    console: Console | None = None,
    file_prefix: str = "keyfreq",
) -> None:
    """루트 로거에 콘솔/파일 핸들러를 붙인다.

    두 번째 호출부터는 레벨만 바꾸고 핸들러는 그대로 둔다.

    Args:
        level: 로깅 레벨 (정수 또는 "DEBUG" 같은 이름)
        log_to_file: 로그 파일을 남길지 여부
        log_dir: 로그 파일 디렉토리 (None이면 LOGS_DIR)
        console: RichHandler가 쓸 콘솔 (None이면 공용 콘솔)
        file_prefix: 로그 파일 이름 앞부분 (보통 서브커맨드 이름)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.handlers:
        return

    rich_handler = RichHandler(
        console=console or get_console(),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        log_time_format="%H:%M:%S",
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(rich_handler)

    if not log_to_file:
        return

    log_file = _open_log_file(log_dir or LOGS_DIR, file_prefix)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    root_logger.addHandler(file_handler)
    root_logger.info("📝 로그 파일: %s", log_file)


def get_logger(name: str) -> logging.Logger:
    """이름 붙은 모듈 로거를 반환한다."""
    return logging.getLogger(name)
