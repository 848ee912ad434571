"""로깅 설정 모듈.

Logging configuration: a single stdout handler on the root logger.
Modules log through ``logging.getLogger(__name__)``.
"""

import logging
import sys

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = logging.INFO) -> None:
    """루트 로거에 stdout 핸들러를 설치합니다.

    Configure root logging with one stdout handler.
    Handlers installed earlier (e.g. by basicConfig) are replaced so that
    repeated calls do not duplicate output.

    Args:
        level: 로그 레벨 이름 또는 숫자 (Level name such as "INFO", or a logging constant)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
