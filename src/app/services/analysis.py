"""
Analysis Service: 화면 상태 머신 (UPLOAD → ANALYZING → RESULT).

상태 규칙:
- 상태는 AppState 값 하나 (UploadState | AnalyzingState | ResultState)
- 전이는 self._state 한 번의 대입 → view/outcome이 어긋난 상태는 관찰 불가
- ANALYZING 진입 시에만 provider.analyze 호출
- 분석 경로의 모든 예외는 여기서 Failure 메시지로 변환 후 UPLOAD 복귀
- 선택/리셋마다 generation 증가 → 늦게 도착한 이전 응답은 버림
"""

import logging

from src.app.providers.base import VisionProvider
from src.core.ids import generate_run_id
from src.core.ingest import FileBlob, ingest
from src.core.logging import log_transition
from src.domain.constants import UPLOAD_MAX_SIZE_MB
from src.domain.errors import InvalidInputError, user_message_for
from src.domain.schemas import (
    AnalysisOutcome,
    AnalyzingState,
    AppState,
    ResultState,
    UploadedImage,
    UploadState,
    ViewState,
)

logger = logging.getLogger(__name__)


class AnalysisController:
    """
    세션 하나의 분석 흐름 관리.

    Usage:
        controller = AnalysisController(provider, session_id="SES-...")
        state = await controller.select_image(upload_file)
        controller.reset()
    """

    def __init__(
        self,
        provider: VisionProvider,
        session_id: str = "local",
        max_upload_mb: int = UPLOAD_MAX_SIZE_MB,
    ):
        """
        Args:
            provider: 이미지 분석 Provider
            session_id: 로그용 세션 ID
            max_upload_mb: 업로드 최대 크기 (MB)
        """
        self.provider = provider
        self.session_id = session_id
        self.max_upload_mb = max_upload_mb
        self._state: AppState = UploadState()
        self._generation = 0

    # =========================================================================
    # State inspection
    # =========================================================================

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def view_state(self) -> ViewState:
        return self._state.view

    @property
    def image(self) -> UploadedImage | None:
        return self._state.image

    @property
    def outcome(self) -> AnalysisOutcome | None:
        return self._state.outcome

    @property
    def generation(self) -> int:
        return self._generation

    # =========================================================================
    # Events
    # =========================================================================

    async def select_image(self, file_blob: FileBlob) -> AppState:
        """
        파일 선택 이벤트.

        비이미지/빈 파일은 분석 없이 UPLOAD + Failure 로 남는다.

        Returns:
            전이 후 상태
        """
        try:
            image = await ingest(file_blob, max_size_mb=self.max_upload_mb)
        except InvalidInputError as e:
            # 진행 중인 분석이 있으면 그 결과도 무효
            self._generation += 1
            self._transition(UploadState(error=user_message_for(e)), error_code=e.code)
            return self._state

        return await self.analyze_image(image)

    async def analyze_image(self, image: UploadedImage) -> AppState:
        """
        ANALYZING 진입 → provider 호출 → RESULT 또는 UPLOAD.

        Returns:
            전이 후 상태 (stale 응답이면 현재 상태 그대로)
        """
        self._generation += 1
        generation = self._generation
        run_id = generate_run_id()

        self._transition(AnalyzingState(image=image, generation=generation), run_id=run_id)

        try:
            text = await self.provider.analyze(image.base64_payload, image.mime_type)
        except Exception as e:
            if self._is_stale(generation):
                logger.info(f"Discarding stale failure run_id={run_id} generation={generation}")
                return self._state

            error_code = getattr(e, "code", type(e).__name__)
            self._transition(
                UploadState(error=user_message_for(e)),
                run_id=run_id,
                error_code=error_code,
            )
            return self._state

        if self._is_stale(generation):
            logger.info(f"Discarding stale result run_id={run_id} generation={generation}")
            return self._state

        self._transition(ResultState(image=image, text=text), run_id=run_id)
        return self._state

    def reset(self) -> AppState:
        """
        리셋: 이미지/결과/에러 제거 후 UPLOAD.

        이미 깨끗한 UPLOAD 상태면 아무것도 하지 않음.
        """
        if self._state == UploadState():
            return self._state

        self._generation += 1
        self._transition(UploadState())
        return self._state

    # =========================================================================
    # Internals
    # =========================================================================

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    def _transition(self, new_state: AppState, **context: object) -> None:
        previous = self._state
        self._state = new_state
        log_transition(
            logger,
            self.session_id,
            previous.view.value,
            new_state.view.value,
            generation=self._generation,
            **context,
        )
