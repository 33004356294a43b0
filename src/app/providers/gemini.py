"""
Google Gemini Vision Provider.

호출 정책:
- API 키 없으면 클라이언트 생성 전에 MissingCredentialError (네트워크 호출 0회)
- 요청 parts는 정확히 2개: [고정 프롬프트, inline 이미지]
- 재시도/스트리밍/내부 타임아웃 없음
- 외부 예외는 전부 TransportError로 감싸되 message는 원문 유지
"""

import base64
import binascii
import logging
from typing import Any

from src.app.config import AppConfig
from src.app.prompts import PRODUCT_ANALYSIS_PROMPT
from src.domain.errors import (
    EmptyResponseError,
    InvalidInputError,
    MissingCredentialError,
    TransportError,
)

from .base import VisionProvider

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL_MESSAGE = (
    "API Key is missing. Please check your environment configuration."
)
EMPTY_RESPONSE_MESSAGE = "No analysis generated."


class GeminiVisionProvider(VisionProvider):
    """
    Gemini Vision Provider.

    Usage:
        provider = GeminiVisionProvider(AppConfig(api_key="..."))
        text = await provider.analyze(image.base64_payload, image.mime_type)
    """

    def __init__(self, config: AppConfig):
        """
        Args:
            config: API 키와 모델 ID를 담은 설정
        """
        self.config = config
        self.model = config.model
        self._client: Any = None

    def _get_client(self) -> Any:
        """Gemini 클라이언트 (lazy init)."""
        if self._client is None:
            try:
                import google.generativeai as genai
            except ImportError as e:
                raise TransportError(
                    "google-generativeai package not installed. "
                    "Run: pip install google-generativeai",
                    code="GEMINI_NOT_INSTALLED",
                ) from e
            genai.configure(api_key=self.config.api_key)
            self._client = genai
        return self._client

    def build_parts(self, base64_payload: str, mime_type: str) -> list[Any]:
        """
        요청 parts 구성: [프롬프트, inline 이미지].

        Raises:
            InvalidInputError: payload가 유효한 base64가 아님
        """
        try:
            image_bytes = base64.b64decode(base64_payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidInputError("Image data is not valid base64") from e

        return [
            PRODUCT_ANALYSIS_PROMPT,
            {"mime_type": mime_type, "data": image_bytes},
        ]

    async def analyze(self, base64_payload: str, mime_type: str) -> str:
        """
        이미지 분석 (단일 호출).

        Raises:
            MissingCredentialError: API 키 없음 (payload 검사보다 먼저)
            InvalidInputError: payload가 유효한 base64가 아님
            EmptyResponseError, TransportError
        """
        if not self.config.has_credential:
            raise MissingCredentialError(MISSING_CREDENTIAL_MESSAGE)

        parts = self.build_parts(base64_payload, mime_type)
        genai = self._get_client()

        try:
            model_instance = genai.GenerativeModel(self.model)
            response = await model_instance.generate_content_async(parts)
        except Exception as e:
            logger.error(f"Gemini analysis failed ({self.model}): {e}", exc_info=True)
            raise TransportError(
                str(e),
                model=self.model,
                error_type=type(e).__name__,
            ) from e

        text = self._extract_text(response)
        if not text:
            logger.warning(f"Gemini returned no text ({self.model})")
            raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE, model=self.model)

        return text

    def _extract_text(self, response: Any) -> str | None:
        """
        응답 텍스트 추출.

        response.text는 후보가 없거나 차단되면 ValueError를 던짐 → None.
        """
        if response is None:
            return None
        try:
            text = response.text
        except ValueError:
            return None
        return text if isinstance(text, str) else None
