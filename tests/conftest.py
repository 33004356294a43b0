"""
Pytest fixtures for ProductLens tests.

구성:
- 업로드 파일 대역 (FakeBlob)
- 호출을 기록하는 Provider 대역 (RecordingProvider)
- 설정 fixture
"""

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from src.app.config import AppConfig
from src.app.providers.base import VisionProvider

# 내용 검증은 하지 않으므로 PNG 시그니처 + 임의 바이트면 충분
SAMPLE_IMAGE_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x01fake-image-body\xff\xfe"

SAMPLE_ANALYSIS = (
    "### PRODUCT SUMMARY\n"
    "A stainless steel travel mug.\n\n"
    "### PROS\n"
    "- Keeps drinks hot\n"
    "- Leak-proof lid\n\n"
    "### FINAL RECOMMENDATION\n"
    "Buy it.\n"
)


# =============================================================================
# Test Doubles
# =============================================================================


class FakeBlob:
    """UploadFile 대역: content_type, filename, async read()."""

    def __init__(
        self,
        data: bytes = SAMPLE_IMAGE_BYTES,
        content_type: str | None = "image/jpeg",
        filename: str | None = "photo.jpg",
    ):
        self.data = data
        self.content_type = content_type
        self.filename = filename
        self.read_calls = 0

    async def read(self, size: int = -1) -> bytes:
        self.read_calls += 1
        return self.data


class RecordingProvider(VisionProvider):
    """
    analyze 호출을 기록하는 Provider 대역.

    - result: 반환할 텍스트
    - error: 설정하면 반환 대신 raise
    - on_call: 호출 직후(응답 전) 실행할 콜백 (ANALYZING 상태 관찰용)
    """

    model = "fake-vision-model"

    def __init__(
        self,
        result: str = SAMPLE_ANALYSIS,
        error: BaseException | None = None,
    ):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.on_call: Callable[[], None] | None = None

    async def analyze(self, base64_payload: str, mime_type: str) -> str:
        self.calls.append((base64_payload, mime_type))
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def app_config() -> AppConfig:
    """API 키가 있는 테스트 설정."""
    return AppConfig(api_key="test-api-key")


@pytest.fixture
def make_blob() -> Callable[..., FakeBlob]:
    """FakeBlob 팩토리."""
    return FakeBlob


@pytest.fixture
def image_blob() -> FakeBlob:
    """유효한 이미지 업로드 (photo.jpg)."""
    return FakeBlob()


@pytest.fixture
def pdf_blob() -> FakeBlob:
    """비이미지 업로드 (document.pdf)."""
    return FakeBlob(
        data=b"%PDF-1.4 fake",
        content_type="application/pdf",
        filename="document.pdf",
    )


@pytest.fixture
def provider() -> RecordingProvider:
    """성공 응답 Provider."""
    return RecordingProvider()


@pytest.fixture
def make_provider() -> Callable[..., RecordingProvider]:
    """RecordingProvider 팩토리 (result/error 지정)."""
    return RecordingProvider


@pytest.fixture
def sample_image_bytes() -> bytes:
    return SAMPLE_IMAGE_BYTES


@pytest.fixture
def sample_analysis() -> str:
    return SAMPLE_ANALYSIS
