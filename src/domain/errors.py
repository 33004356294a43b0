"""
Error definitions for ProductLens.

규칙:
- 조용한 실패 금지 → 명시적 예외로 실패
- 분석 경로의 모든 예외는 controller 경계에서 Failure 메시지로 변환
- message는 사용자에게 그대로 노출되는 원문 (code는 로그/JSON용)
"""

from typing import Any


class ProductLensError(Exception):
    """
    ProductLens 공통 에러.

    Usage:
        raise TransportError("network down", model="gemini-2.5-flash")
    """

    code: str = "PRODUCTLENS_ERROR"

    def __init__(self, message: str = "", code: str | None = None, **context: Any) -> None:
        if code is not None:
            self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"[{self.code}] {self.message}" if self.message else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class InvalidInputError(ProductLensError):
    """이미지가 아닌 파일, 빈 파일, 크기 초과 파일."""

    code = "INVALID_INPUT"


class MissingCredentialError(ProductLensError):
    """API 키 미설정. 네트워크 호출 전에 발생."""

    code = "MISSING_CREDENTIAL"


class EmptyResponseError(ProductLensError):
    """생성 응답에 텍스트가 없음."""

    code = "EMPTY_RESPONSE"


class TransportError(ProductLensError):
    """외부 엔드포인트 호출 실패 (네트워크/프로토콜). message는 원문 그대로."""

    code = "TRANSPORT_ERROR"


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Ingest ===
    INVALID_INPUT = InvalidInputError.code

    # === Analysis ===
    MISSING_CREDENTIAL = MissingCredentialError.code
    EMPTY_RESPONSE = EmptyResponseError.code
    TRANSPORT_ERROR = TransportError.code


# 실패에 메시지가 없을 때 사용자에게 보여줄 기본 문구
DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


def user_message_for(error: BaseException) -> str:
    """
    예외 → 사용자 메시지.

    ProductLensError는 message 원문, 그 외는 str(error).
    둘 다 비어 있으면 DEFAULT_ERROR_MESSAGE.
    """
    if isinstance(error, ProductLensError):
        return error.message or DEFAULT_ERROR_MESSAGE
    return str(error) or DEFAULT_ERROR_MESSAGE
