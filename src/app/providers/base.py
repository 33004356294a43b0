"""
AI Provider 추상 인터페이스.

- Provider 추상화로 모델/벤더 교체 가능
- 계약: analyze(base64_payload, mime_type) -> 분석 텍스트
- 실패는 InvalidInputError / MissingCredentialError / EmptyResponseError / TransportError 로만 전파
"""

from abc import ABC, abstractmethod


class VisionProvider(ABC):
    """
    이미지 분석 Provider 추상 인터페이스.

    역할: 이미지 + 고정 프롬프트 → markdown 텍스트 (구조 검증 없음)
    """

    model: str

    @abstractmethod
    async def analyze(self, base64_payload: str, mime_type: str) -> str:
        """
        이미지 분석.

        Args:
            base64_payload: data URL 접두어 없는 base64
            mime_type: 이미지 MIME 타입

        Returns:
            모델이 생성한 텍스트 (비어 있지 않음)

        Raises:
            InvalidInputError: payload가 유효한 base64가 아님
            MissingCredentialError: API 키 없음 (네트워크 호출 없음)
            EmptyResponseError: 응답 텍스트 없음
            TransportError: 외부 호출 실패
        """
        ...
