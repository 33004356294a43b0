"""
App Configuration.

- default.yaml (프로젝트 루트) + 환경변수 (.env 포함)
- 전역 조회 대신 AppConfig 객체를 생성자로 주입
- API 키는 여기서 한 번 읽고, provider는 호출 시점에 존재 여부만 확인
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.domain.constants import API_KEY_ENV_VARS, DEFAULT_GEMINI_MODEL, UPLOAD_MAX_SIZE_MB

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정."""

    api_key: str | None = None
    model: str = DEFAULT_GEMINI_MODEL
    max_upload_mb: int = UPLOAD_MAX_SIZE_MB
    log_level: str = "INFO"

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        env: Mapping[str, str] | None = None,
    ) -> "AppConfig":
        """
        yaml dict + 환경변수 → AppConfig.

        환경변수가 yaml 값보다 우선.

        Args:
            data: default.yaml 내용
            env: 환경변수 (None이면 os.environ)
        """
        if env is None:
            env = os.environ

        ai = data.get("ai") or {}
        upload = data.get("upload") or {}
        logging_section = data.get("logging") or {}

        api_key = next((env[name] for name in API_KEY_ENV_VARS if env.get(name)), None)

        return cls(
            api_key=api_key,
            model=env.get("GEMINI_MODEL") or ai.get("model") or DEFAULT_GEMINI_MODEL,
            max_upload_mb=int(upload.get("max_size_mb", UPLOAD_MAX_SIZE_MB)),
            log_level=env.get("LOG_LEVEL") or logging_section.get("level") or "INFO",
        )

    def to_dict(self) -> dict[str, Any]:
        """로그용 (API 키는 노출하지 않음)."""
        return {
            "model": self.model,
            "max_upload_mb": self.max_upload_mb,
            "log_level": self.log_level,
            "has_credential": self.has_credential,
        }


def load_yaml(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드. 없으면 빈 dict."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    .env → 환경변수 로드 후 AppConfig 생성.

    Args:
        config_path: yaml 경로 (None이면 프로젝트 루트 default.yaml)
    """
    load_dotenv()
    return AppConfig.from_mapping(load_yaml(config_path))
