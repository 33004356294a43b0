"""
ID 생성: session_id, run_id

규칙:
- session_id는 브라우저 세션당 1회 발급
- run_id는 분석 요청마다 새로 발급 (로그 추적용)
"""

import uuid
from datetime import UTC, datetime

from src.domain.constants import RUN_ID_PREFIX, SESSION_ID_PREFIX


def generate_session_id() -> str:
    """
    Session ID 생성.

    포맷: SES-{uuid hex 16자}

    Returns:
        session_id 문자열
    """
    return f"{SESSION_ID_PREFIX}{uuid.uuid4().hex[:16]}"


def generate_run_id() -> str:
    """
    Run ID 생성.

    고유성 보장: UUID v4
    포맷: RUN-{timestamp}-{uuid[:8]}

    Returns:
        run_id 문자열
    """
    now = datetime.now(UTC)
    timestamp = now.strftime("%Y%m%d%H%M%S")
    unique = uuid.uuid4().hex[:8]

    return f"{RUN_ID_PREFIX}{timestamp}-{unique}"


def sanitize_session_id(value: str | None) -> str | None:
    """
    클라이언트가 보낸 session_id 정리.

    - 허용 문자: ASCII 영숫자, '-', '_'
    - 최대 64자
    - 정리 후 비어 있으면 None (새 세션 발급 대상)
    """
    if not value:
        return None

    sanitized = "".join(c for c in value if c.isascii() and (c.isalnum() or c in "-_"))
    return sanitized[:64] or None
