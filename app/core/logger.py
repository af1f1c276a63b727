# app/core/logger.py

"""
애플리케이션 전역 로깅 설정 모듈입니다.
각 모듈은 `logging.getLogger(__name__)` 으로 로거를 얻고,
핸들러/포맷 설정은 애플리케이션 시작 시 이 모듈에서 한 번만 수행합니다.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """루트 로거에 스트림 핸들러를 설정합니다. 중복 호출 시 레벨만 갱신합니다."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # uvicorn 접근 로그는 자체 핸들러를 사용합니다.
    logging.getLogger("uvicorn.access").propagate = False
    _configured = True
