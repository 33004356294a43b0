"""
test_config.py - AppConfig 테스트

검증 포인트:
- yaml + 환경변수 병합 (환경변수 우선)
- API 키 조회 순서: GOOGLE_API_KEY → API_KEY
- 설정 파일 없으면 기본값
"""

from pathlib import Path

import pytest

from src.app.config import AppConfig, load_config, load_yaml
from src.domain.constants import DEFAULT_GEMINI_MODEL


@pytest.fixture
def clean_env(monkeypatch):
    """설정 관련 환경변수 제거."""
    for name in ("GOOGLE_API_KEY", "API_KEY", "GEMINI_MODEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # .env 파일이 테스트 환경을 오염시키지 않도록
    monkeypatch.setattr("src.app.config.load_dotenv", lambda: False)
    return monkeypatch


class TestFromMapping:
    """AppConfig.from_mapping 테스트."""

    def test_defaults(self):
        config = AppConfig.from_mapping({}, env={})

        assert config.api_key is None
        assert config.has_credential is False
        assert config.model == DEFAULT_GEMINI_MODEL
        assert config.max_upload_mb == 10
        assert config.log_level == "INFO"

    def test_yaml_values(self):
        data = {
            "ai": {"model": "gemini-custom"},
            "upload": {"max_size_mb": 4},
            "logging": {"level": "DEBUG"},
        }

        config = AppConfig.from_mapping(data, env={})

        assert config.model == "gemini-custom"
        assert config.max_upload_mb == 4
        assert config.log_level == "DEBUG"

    def test_env_overrides_yaml(self):
        data = {"ai": {"model": "gemini-custom"}, "logging": {"level": "DEBUG"}}
        env = {"GEMINI_MODEL": "gemini-env", "LOG_LEVEL": "ERROR"}

        config = AppConfig.from_mapping(data, env=env)

        assert config.model == "gemini-env"
        assert config.log_level == "ERROR"

    def test_google_api_key(self):
        config = AppConfig.from_mapping({}, env={"GOOGLE_API_KEY": "g-key"})

        assert config.api_key == "g-key"
        assert config.has_credential is True

    def test_api_key_fallback(self):
        config = AppConfig.from_mapping({}, env={"API_KEY": "plain-key"})
        assert config.api_key == "plain-key"

    def test_google_api_key_wins(self):
        env = {"GOOGLE_API_KEY": "g-key", "API_KEY": "plain-key"}
        assert AppConfig.from_mapping({}, env=env).api_key == "g-key"

    def test_empty_key_is_missing(self):
        config = AppConfig.from_mapping({}, env={"GOOGLE_API_KEY": ""})
        assert config.has_credential is False

    def test_null_sections(self):
        """yaml 섹션이 비어 있어도 (None) 기본값."""
        config = AppConfig.from_mapping({"ai": None, "upload": None}, env={})
        assert config.model == DEFAULT_GEMINI_MODEL

    def test_to_dict_hides_key(self):
        config = AppConfig(api_key="secret")

        data = config.to_dict()

        assert "api_key" not in data
        assert "secret" not in str(data)
        assert data["has_credential"] is True


class TestLoadYaml:
    """load_yaml 테스트."""

    def test_missing_file(self, tmp_path: Path):
        assert load_yaml(tmp_path / "nope.yaml") == {}

    def test_non_mapping_file(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        assert load_yaml(path) == {}

    def test_project_default_yaml(self, default_config):
        """프로젝트 default.yaml 구조."""
        assert default_config["ai"]["model"] == DEFAULT_GEMINI_MODEL
        assert default_config["upload"]["max_size_mb"] == 10


class TestLoadConfig:
    """load_config 테스트."""

    def test_reads_file_and_env(self, tmp_path: Path, clean_env):
        path = tmp_path / "app.yaml"
        path.write_text("ai:\n  model: gemini-file\n", encoding="utf-8")
        clean_env.setenv("GOOGLE_API_KEY", "env-key")

        config = load_config(path)

        assert config.model == "gemini-file"
        assert config.api_key == "env-key"

    def test_without_key(self, tmp_path: Path, clean_env):
        config = load_config(tmp_path / "missing.yaml")
        assert config.has_credential is False
