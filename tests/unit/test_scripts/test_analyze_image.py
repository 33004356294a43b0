"""
test_analyze_image.py - analyze_image.py 스크립트 테스트

테스트 케이스:
- TC1: 이미지 파일 → 결과 markdown 출력, 종료 코드 0
- TC2: 비이미지 파일 → provider 호출 없음, 종료 코드 1
- TC3: provider 실패 → 종료 코드 1
"""

import sys
from pathlib import Path

import pytest

# scripts 모듈 임포트를 위한 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "scripts"))

from analyze_image import LocalImageFile, analyze_file

from src.domain.errors import TransportError


@pytest.fixture
def photo_path(tmp_path: Path, sample_image_bytes: bytes) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(sample_image_bytes)
    return path


class TestLocalImageFile:
    """LocalImageFile 어댑터."""

    @pytest.mark.asyncio
    async def test_guesses_type_and_reads(self, photo_path, sample_image_bytes):
        blob = LocalImageFile(photo_path)

        assert blob.filename == "photo.jpg"
        assert blob.content_type == "image/jpeg"
        assert await blob.read() == sample_image_bytes

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "notes.unknownext"
        path.write_bytes(b"x")

        assert LocalImageFile(path).content_type is None


class TestAnalyzeFile:
    """analyze_file 테스트."""

    @pytest.mark.asyncio
    async def test_prints_result(self, photo_path, app_config, provider, sample_analysis, capsys):
        exit_code = await analyze_file(photo_path, app_config, provider=provider)

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == sample_analysis.strip()
        assert provider.calls[0][1] == "image/jpeg"

    @pytest.mark.asyncio
    async def test_non_image(self, tmp_path, app_config, provider):
        path = tmp_path / "document.pdf"
        path.write_bytes(b"%PDF-1.4")

        exit_code = await analyze_file(path, app_config, provider=provider)

        assert exit_code == 1
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_provider_failure(self, photo_path, app_config, make_provider, capsys):
        provider = make_provider(error=TransportError("network down"))

        exit_code = await analyze_file(photo_path, app_config, provider=provider)

        assert exit_code == 1
        assert capsys.readouterr().out == ""
