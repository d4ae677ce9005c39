"""Logging Configuration.

json_logs=True면 ECS 호환 JSON, 아니면 일반 텍스트 로그입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "redis")


def setup_logging(
    level: str = "INFO",
    json_logs: bool = False,
    *,
    service_name: str = "accounts-api",
    service_version: str = "1.0.0",
    environment: str = "local",
) -> None:
    """애플리케이션 로깅을 설정합니다."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_logs:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ecs_logging.StdlibFormatter())

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()
        root_logger.addHandler(handler)

        # 서비스 메타데이터 추가
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.service = {
                "name": service_name,
                "version": service_version,
                "environment": environment,
            }
            return record

        logging.setLogRecordFactory(record_factory)
    else:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)],
        )

    # 외부 라이브러리 로그 레벨 조정
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
