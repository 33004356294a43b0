"""
Data schemas for ProductLens.

규칙:
- UploadedImage는 불변 (선택 1회당 1개, reset 시 폐기)
- 화면 상태는 AppState 하나로만 표현 (view/outcome 따로 두지 않음)
- RESULT는 image + Success, ANALYZING은 image + Pending이 구조적으로 보장됨
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# =============================================================================
# Enums
# =============================================================================

class ViewState(str, Enum):
    """화면 모드."""
    UPLOAD = "UPLOAD"
    ANALYZING = "ANALYZING"
    RESULT = "RESULT"


class OutcomeKind(str, Enum):
    """AnalysisOutcome 태그."""
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


# =============================================================================
# Uploaded Image
# =============================================================================

@dataclass(frozen=True)
class UploadedImage:
    """
    업로드된 이미지.

    - preview_data_url: data:<mime>;base64,<payload> (미리보기 <img src>용)
    - base64_payload: 접두어 없는 순수 base64
    """
    filename: str
    raw_bytes: bytes
    preview_data_url: str
    base64_payload: str
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.raw_bytes)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 (원본 바이트/payload 제외)."""
        return {
            "filename": self.filename,
            "mime_type": self.mime_type,
            "size": self.size,
        }


# =============================================================================
# Analysis Outcome (tagged union)
# =============================================================================

@dataclass(frozen=True)
class Pending:
    kind = OutcomeKind.PENDING

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class Success:
    text: str
    kind = OutcomeKind.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class Failure:
    message: str
    kind = OutcomeKind.FAILURE

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


AnalysisOutcome = Pending | Success | Failure


# =============================================================================
# App State (tagged variant)
# =============================================================================

@dataclass(frozen=True)
class UploadState:
    """업로드 대기. error가 있으면 직전 실패 메시지를 표시."""
    error: str | None = None
    view = ViewState.UPLOAD

    @property
    def image(self) -> None:
        return None

    @property
    def outcome(self) -> AnalysisOutcome | None:
        return Failure(self.error) if self.error is not None else None


@dataclass(frozen=True)
class AnalyzingState:
    """분석 중. generation은 이 요청의 세대 번호."""
    image: UploadedImage
    generation: int
    view = ViewState.ANALYZING

    @property
    def outcome(self) -> AnalysisOutcome:
        return Pending()


@dataclass(frozen=True)
class ResultState:
    """분석 완료."""
    image: UploadedImage
    text: str
    view = ViewState.RESULT

    @property
    def outcome(self) -> AnalysisOutcome:
        return Success(self.text)


AppState = UploadState | AnalyzingState | ResultState


def state_to_dict(state: AppState) -> dict[str, Any]:
    """상태 스냅샷 (API 응답/로그용)."""
    outcome = state.outcome
    return {
        "view": state.view.value,
        "image": state.image.to_dict() if state.image is not None else None,
        "outcome": outcome.to_dict() if outcome is not None else None,
    }
