"""
Domain Constants: 앱 전역 상수.

업로드 정책, 모델 기본값 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Upload Policy (업로드 정책)
# =============================================================================
# 선언된 content type이 image/ 로 시작해야 함.
# 화면에 표시되는 확장자 목록은 안내용일 뿐, 검증은 MIME 접두어로만 한다.

IMAGE_MIME_PREFIX = "image/"
UPLOAD_DISPLAY_FORMATS = ("JPG", "PNG", "WEBP")
UPLOAD_MAX_SIZE_MB = 10

# =============================================================================
# Data URL
# =============================================================================

DATA_URL_TEMPLATE = "data:{mime_type};base64,{payload}"

# =============================================================================
# AI
# =============================================================================

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# API 키 환경변수 (앞쪽 우선)
API_KEY_ENV_VARS = ("GOOGLE_API_KEY", "API_KEY")

# =============================================================================
# ID Prefixes
# =============================================================================

SESSION_ID_PREFIX = "SES-"
RUN_ID_PREFIX = "RUN-"
