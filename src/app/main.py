"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.app.config import load_config
from src.app.providers.gemini import GeminiVisionProvider
from src.app.routes import analyze
from src.core.logging import configure_logging

logger = logging.getLogger(__name__)

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 로깅 설정, provider 생성
    종료 시: 세션 정리
    """
    # Startup
    config = load_config()
    configure_logging(config.log_level)

    app.state.config = config
    app.state.provider = GeminiVisionProvider(config)

    logger.info(f"ProductLens started: {config.to_dict()}")
    if not config.has_credential:
        logger.warning(
            "GOOGLE_API_KEY is not set; every analysis will fail until it is configured"
        )

    yield

    # Shutdown
    analyze._sessions.clear()


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="ProductLens AI",
    description="제품 사진 → 멀티모달 AI 분석 리포트",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS, JS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(analyze.router, prefix="", tags=["Analyze"])

# API 라우트
app.include_router(analyze.api_router, prefix="/api/analyze", tags=["Analyze API"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
