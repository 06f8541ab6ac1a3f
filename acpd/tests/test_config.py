"""Tests for settings layering (defaults, YAML, environment, overrides)."""

import pytest

from acpd.core.config import load_settings
from acpd.core.constants import DEFAULT_PORT, DEFAULT_PRIMER_BUDGET
from acpd.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ACPD_HOST", "ACPD_PORT", "ACPD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _write_settings(root, text):
    acp_dir = root / ".acp"
    acp_dir.mkdir(exist_ok=True)
    (acp_dir / "acpd.yaml").write_text(text)


class TestSettings:

    def test_defaults(self, tmp_path):
        settings = load_settings(tmp_path)
        assert settings.project_root == tmp_path.resolve()
        assert settings.port == DEFAULT_PORT
        assert settings.default_budget == DEFAULT_PRIMER_BUDGET
        assert settings.catalog_path is None

    def test_yaml_file(self, tmp_path):
        _write_settings(tmp_path, (
            "server:\n"
            "  port: 9300\n"
            "  cors_origins: ['http://localhost:5173']\n"
            "logging:\n"
            "  level: debug\n"
            "primer:\n"
            "  default_budget: 350\n"
            "  catalog: extra.yaml\n"
        ))
        settings = load_settings(tmp_path)
        assert settings.port == 9300
        assert settings.cors_origins == ["http://localhost:5173"]
        assert settings.log_level == "DEBUG"
        assert settings.default_budget == 350
        assert settings.catalog_path == tmp_path.resolve() / ".acp" / "extra.yaml"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        _write_settings(tmp_path, "server:\n  port: 9300\n")
        monkeypatch.setenv("ACPD_PORT", "9400")
        assert load_settings(tmp_path).port == 9400

    def test_explicit_overrides_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ACPD_PORT", "9400")
        settings = load_settings(tmp_path, port=9500, host=None)
        assert settings.port == 9500
        assert settings.host == "127.0.0.1"

    def test_bad_port(self, tmp_path):
        _write_settings(tmp_path, "server:\n  port: lots\n")
        with pytest.raises(ConfigError, match="server.port"):
            load_settings(tmp_path)

    def test_negative_budget(self, tmp_path):
        _write_settings(tmp_path, "primer:\n  default_budget: -5\n")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path, config_file=tmp_path / "nope.yaml")

    def test_unknown_yaml_log_level(self, tmp_path):
        _write_settings(tmp_path, "logging:\n  level: chatty\n")
        with pytest.raises(ConfigError, match="logging.level"):
            load_settings(tmp_path)

    def test_unknown_env_log_level(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ACPD_LOG_LEVEL", "verbose")
        with pytest.raises(ConfigError, match="ACPD_LOG_LEVEL"):
            load_settings(tmp_path)

    def test_env_log_level_normalized(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ACPD_LOG_LEVEL", " warning ")
        assert load_settings(tmp_path).log_level == "WARNING"

    def test_invalid_yaml(self, tmp_path):
        _write_settings(tmp_path, "server: [unclosed\n")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)
