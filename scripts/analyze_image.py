#!/usr/bin/env python
"""
로컬 이미지 파일 분석 스크립트 (API 키/연결 확인용).

웹 화면과 같은 AnalysisController + GeminiVisionProvider 경로를 탄다.

실행:
    uv run python scripts/analyze_image.py path/to/photo.jpg
    uv run python scripts/analyze_image.py path/to/photo.jpg --model gemini-2.5-pro
"""

import argparse
import asyncio
import logging
import mimetypes
import sys
from dataclasses import replace
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.app.config import AppConfig, load_config
from src.app.providers.base import VisionProvider
from src.app.providers.gemini import GeminiVisionProvider
from src.app.services.analysis import AnalysisController
from src.core.logging import configure_logging
from src.domain.schemas import ViewState

logger = logging.getLogger(__name__)


class LocalImageFile:
    """디스크 파일을 업로드 파일처럼 다루는 어댑터."""

    def __init__(self, path: Path):
        self.path = path
        self.filename = path.name
        self.content_type, _ = mimetypes.guess_type(path.name)

    async def read(self, size: int = -1) -> bytes:
        return self.path.read_bytes()


async def analyze_file(
    path: Path,
    config: AppConfig,
    provider: VisionProvider | None = None,
) -> int:
    """
    이미지 한 장 분석 후 결과 markdown을 stdout으로 출력.

    Returns:
        종료 코드 (RESULT면 0, 그 외 1)
    """
    if provider is None:
        provider = GeminiVisionProvider(config)

    controller = AnalysisController(
        provider,
        session_id="CLI",
        max_upload_mb=config.max_upload_mb,
    )
    await controller.select_image(LocalImageFile(path))

    if controller.view_state is ViewState.RESULT:
        print(controller.outcome.text)
        return 0

    logger.error(f"Analysis failed: {controller.outcome.message}")
    return 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="제품 사진 한 장을 Gemini로 분석",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("image", type=str, help="분석할 이미지 파일 경로")
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="모델 ID (기본: default.yaml의 ai.model)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="설정 파일 경로 (기본: 프로젝트 루트 default.yaml)",
    )

    args = parser.parse_args()

    config = load_config(Path(args.config) if args.config else None)
    if args.model:
        config = replace(config, model=args.model)
    configure_logging(config.log_level)

    image_path = Path(args.image)
    if not image_path.is_file():
        logger.error(f"이미지 파일 없음: {image_path}")
        return 1

    if not config.has_credential:
        logger.warning("GOOGLE_API_KEY가 설정되지 않았습니다. .env 파일을 확인하세요.")

    logger.info(f"분석 시작: {image_path} (model={config.model})")
    return asyncio.run(analyze_file(image_path, config))


if __name__ == "__main__":
    sys.exit(main())
