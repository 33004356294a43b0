"""
Logging: 로깅 설정, 상태 전이 로그

규칙:
- 모듈마다 logger = logging.getLogger(__name__)
- 상태 전이는 한 줄 key=value 로 남김 (grep 가능)
- 이미지 원본/base64는 절대 로그에 남기지 않음
"""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    루트 로거 설정.

    Args:
        level: 로그 레벨 이름 (DEBUG/INFO/WARNING/ERROR). 알 수 없으면 INFO.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)


def format_fields(**fields: Any) -> str:
    """key=value 직렬화 (None 값 제외, 입력 순서 유지)."""
    return " ".join(f"{k}={v}" for k, v in fields.items() if v is not None)


def log_transition(
    logger: logging.Logger,
    session_id: str,
    from_view: str,
    to_view: str,
    **context: Any,
) -> None:
    """
    상태 전이 이벤트 기록.

    Args:
        logger: 호출 모듈의 logger
        session_id: 세션 ID
        from_view: 이전 화면 상태
        to_view: 다음 화면 상태
        **context: run_id, generation, error_code 등
    """
    logger.info(
        "state_transition "
        + format_fields(session=session_id, from_view=from_view, to_view=to_view, **context)
    )
