"""
Image Ingest: 업로드 파일 → UploadedImage

규칙:
- 선언된 content type은 type/subtype 으로 정규화 (파라미터 제거, 소문자)
- 정규화 결과가 image/ 로 시작하지 않거나 형식이 깨졌으면 InvalidInputError
- 내용 전체를 읽은 뒤 data URL로 인코딩
- base64_payload = data URL의 첫 번째 ',' 이후 전부 (data: 접두어 없음)
- 빈 파일/크기 초과도 InvalidInputError (세 문자열 모두 non-empty 보장)
"""

import base64
import logging
from typing import Protocol

from src.domain.constants import DATA_URL_TEMPLATE, IMAGE_MIME_PREFIX, UPLOAD_MAX_SIZE_MB
from src.domain.errors import InvalidInputError
from src.domain.schemas import UploadedImage

logger = logging.getLogger(__name__)

INVALID_TYPE_MESSAGE = "Please upload an image file"
EMPTY_FILE_MESSAGE = "The uploaded image is empty"


class FileBlob(Protocol):
    """업로드 파일 인터페이스 (FastAPI UploadFile 호환)."""

    filename: str | None
    content_type: str | None

    async def read(self, size: int = -1) -> bytes: ...


def normalize_mime_type(content_type: str | None) -> str | None:
    """
    선언된 content type → 'type/subtype'.

    'image/png; charset=binary' → 'image/png'. subtype이 없거나 ','/공백이 남으면 None
    (data URL 접두어 분리가 깨지지 않도록).
    """
    if not content_type:
        return None

    mime_type = content_type.split(";", 1)[0].strip().lower()
    main_type, _, subtype = mime_type.partition("/")
    if not main_type or not subtype:
        return None
    if "," in mime_type or any(ch.isspace() for ch in mime_type):
        return None
    return mime_type


def is_image_type(content_type: str | None) -> bool:
    """선언된 MIME 타입이 이미지인지 여부."""
    mime_type = normalize_mime_type(content_type)
    return mime_type is not None and mime_type.startswith(IMAGE_MIME_PREFIX)


def to_data_url(data: bytes, mime_type: str) -> str:
    """바이트 → data URL."""
    payload = base64.b64encode(data).decode("ascii")
    return DATA_URL_TEMPLATE.format(mime_type=mime_type, payload=payload)


def strip_data_url_prefix(data_url: str) -> str:
    """data URL에서 'data:<mime>;base64,' 접두어 제거."""
    _, _, payload = data_url.partition(",")
    return payload


async def ingest(
    file_blob: FileBlob,
    max_size_mb: int = UPLOAD_MAX_SIZE_MB,
) -> UploadedImage:
    """
    업로드 파일 검증 + 인코딩.

    Args:
        file_blob: content_type, filename, async read()를 가진 객체
        max_size_mb: 최대 크기 (MB)

    Returns:
        UploadedImage

    Raises:
        InvalidInputError: 이미지가 아님, 빈 파일, 크기 초과
    """
    content_type = file_blob.content_type
    filename = file_blob.filename or "unknown"

    # 타입 검증은 읽기 전에 (비이미지는 내용을 읽지 않음)
    if not is_image_type(content_type):
        raise InvalidInputError(
            INVALID_TYPE_MESSAGE,
            filename=filename,
            content_type=content_type,
        )

    data = await file_blob.read()
    return ingest_bytes(data, content_type, filename, max_size_mb=max_size_mb)


def ingest_bytes(
    data: bytes,
    content_type: str | None,
    filename: str = "unknown",
    max_size_mb: int = UPLOAD_MAX_SIZE_MB,
) -> UploadedImage:
    """
    바이트 버전 ingest (동기).

    Raises:
        InvalidInputError: 이미지가 아님, 빈 파일, 크기 초과
    """
    if not is_image_type(content_type):
        raise InvalidInputError(
            INVALID_TYPE_MESSAGE,
            filename=filename,
            content_type=content_type,
        )

    if not data:
        raise InvalidInputError(EMPTY_FILE_MESSAGE, filename=filename)

    max_bytes = max_size_mb * 1024 * 1024
    if len(data) > max_bytes:
        raise InvalidInputError(
            f"The image is larger than {max_size_mb} MB",
            filename=filename,
            size=len(data),
        )

    mime_type = normalize_mime_type(content_type)
    data_url = to_data_url(data, mime_type)

    image = UploadedImage(
        filename=filename,
        raw_bytes=data,
        preview_data_url=data_url,
        base64_payload=strip_data_url_prefix(data_url),
        mime_type=mime_type,
    )

    logger.debug(f"Ingested {filename} ({mime_type}, {image.size} bytes)")
    return image
