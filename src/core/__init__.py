"""
Core layer: 프레임워크 무관 핵심 모듈.

역할:
- 이미지 ingest (검증 + data URL 인코딩)
- ID 발급, 로깅 설정
"""

from .ids import generate_run_id, generate_session_id
from .ingest import ingest, ingest_bytes
from .logging import configure_logging, log_transition

__all__ = [
    # ingest
    "ingest",
    "ingest_bytes",
    # ids
    "generate_session_id",
    "generate_run_id",
    # logging
    "configure_logging",
    "log_transition",
]
