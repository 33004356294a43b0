"""
Analyze Routes: 제품 사진 업로드 → 분석 → 결과 (메인 기능).

- GET / → 메인 화면 (현재 세션 상태 렌더)
- POST /api/analyze/upload → 파일 선택 이벤트, 결과 화면 조각 반환 (HTMX)
- POST /api/analyze/reset → 리셋, 업로드 화면 조각 반환
- GET /api/analyze/state → 세션 상태 JSON

세션:
- 브라우저 세션마다 AnalysisController 1개 (메모리)
- session_id는 hidden input + cookie 로 유지
- 모르는 session_id는 새 세션으로 취급 (에러 아님)
"""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Cookie, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.render import find_sections, render_markdown, section_anchor
from src.app.services.analysis import AnalysisController
from src.core.ids import generate_session_id, sanitize_session_id
from src.domain.constants import UPLOAD_DISPLAY_FORMATS
from src.domain.schemas import state_to_dict

logger = logging.getLogger(__name__)

# Jinja2 템플릿 설정
_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)
jinja_templates.env.filters["markdown"] = render_markdown
jinja_templates.env.globals["find_sections"] = find_sections
jinja_templates.env.globals["section_anchor"] = section_anchor
jinja_templates.env.globals["upload_formats"] = UPLOAD_DISPLAY_FORMATS

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints

SESSION_COOKIE = "productlens_session"

# 메모리 세션 상한 (초과 시 가장 오래 안 쓴 세션부터 제거)
MAX_SESSIONS = 256

# Session storage (in-memory)
_sessions: "OrderedDict[str, AnalysisController]" = OrderedDict()


# =============================================================================
# Session Management
# =============================================================================


def get_or_create_controller(
    request: Request,
    session_id: str | None,
) -> tuple[str, AnalysisController]:
    """
    세션 ID에 대응하는 AnalysisController 반환.

    없거나 모르는 ID면 새로 만든다. 조회할 때마다 LRU 순서 갱신.

    Returns:
        (session_id, controller)
    """
    clean_id = sanitize_session_id(session_id)

    if clean_id is not None and clean_id in _sessions:
        _sessions.move_to_end(clean_id)
        return clean_id, _sessions[clean_id]

    if clean_id is None:
        clean_id = generate_session_id()

    config = request.app.state.config
    controller = AnalysisController(
        provider=request.app.state.provider,
        session_id=clean_id,
        max_upload_mb=config.max_upload_mb,
    )
    _sessions[clean_id] = controller

    while len(_sessions) > MAX_SESSIONS:
        evicted_id, _ = _sessions.popitem(last=False)
        logger.info(f"Evicted session {evicted_id}")

    return clean_id, controller


# =============================================================================
# Rendering Helpers
# =============================================================================


def _view_context(session_id: str, controller: AnalysisController) -> dict[str, Any]:
    return {
        "session_id": session_id,
        "state": controller.state,
        "view": controller.view_state.value,
        "image": controller.image,
        "outcome": controller.outcome,
    }


def render_view(
    request: Request,
    session_id: str,
    controller: AnalysisController,
) -> HTMLResponse:
    """현재 상태의 화면 조각 (HTMX swap 대상)."""
    response = jinja_templates.TemplateResponse(
        request,
        "partials/_view.html",
        _view_context(session_id, controller),
    )
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


# =============================================================================
# Page Routes (HTML)
# =============================================================================


@router.get("/", response_class=HTMLResponse)
async def index_page(
    request: Request,
    productlens_session: str | None = Cookie(None),
) -> HTMLResponse:
    """메인 화면. 쿠키에 세션이 있으면 그 상태를 그대로 보여준다."""
    session_id, controller = get_or_create_controller(request, productlens_session)

    response = jinja_templates.TemplateResponse(
        request,
        "index.html",
        _view_context(session_id, controller),
    )
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


# =============================================================================
# API Routes
# =============================================================================


@api_router.post("/upload", response_class=HTMLResponse)
async def upload_image(
    request: Request,
    file: UploadFile = File(...),
    session_id: str | None = Form(None),
    productlens_session: str | None = Cookie(None),
) -> HTMLResponse:
    """
    파일 선택 → ingest → 분석.

    분석이 끝날 때까지 응답을 보류한다 (화면의 ANALYZING 표시는 HTMX indicator).
    실패해도 200 + 업로드 화면 (에러 카드 포함).
    """
    session_id, controller = get_or_create_controller(
        request, session_id or productlens_session
    )

    try:
        await controller.select_image(file)
    finally:
        await file.close()

    return render_view(request, session_id, controller)


@api_router.post("/reset", response_class=HTMLResponse)
async def reset_session(
    request: Request,
    session_id: str | None = Form(None),
    productlens_session: str | None = Cookie(None),
) -> HTMLResponse:
    """리셋 → 업로드 화면."""
    session_id, controller = get_or_create_controller(
        request, session_id or productlens_session
    )
    controller.reset()
    return render_view(request, session_id, controller)


@api_router.get("/state")
async def get_state(
    request: Request,
    session_id: str | None = None,
    productlens_session: str | None = Cookie(None),
) -> dict[str, Any]:
    """세션 상태 스냅샷 (디버깅/클라이언트 폴링용)."""
    session_id, controller = get_or_create_controller(
        request, session_id or productlens_session
    )
    return {
        "session_id": session_id,
        "generation": controller.generation,
        **state_to_dict(controller.state),
    }
