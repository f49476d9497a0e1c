"""Logging configuration.

log_format="json"이면 ECS 호환 JSON 로깅, 그 외에는 텍스트 로깅을 사용합니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "httpcore")

# 반복 호출 시에도 항상 원본 팩토리를 감쌈
_BASE_RECORD_FACTORY = logging.getLogRecordFactory()


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    *,
    service_name: str | None = None,
    environment: str | None = None,
) -> None:
    """애플리케이션 로깅을 설정합니다."""
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if log_format == "json" and service_name:
        service = {"name": service_name, "environment": environment}

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = _BASE_RECORD_FACTORY(*args, **kwargs)
            record.service = service
            return record

        logging.setLogRecordFactory(record_factory)
    else:
        logging.setLogRecordFactory(_BASE_RECORD_FACTORY)

    # 외부 라이브러리 로그 레벨 조정
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
