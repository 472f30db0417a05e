"""Tests for calcula configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from calcula.core.config import DEFAULT_PROMPT, CalcConfig, load_config
from calcula.core.errors import ConfigError


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "calcula.toml"
    path.write_text(body)
    return path


class TestDefaults:
    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config == CalcConfig()
        assert config.precision == 6
        assert config.strict is False
        assert config.max_line_length == 2000
        assert config.prompt == DEFAULT_PROMPT
        assert config.log_level == "WARNING"

    def test_validation(self) -> None:
        with pytest.raises(ConfigError, match="precision"):
            CalcConfig(precision=-1)
        with pytest.raises(ConfigError, match="max_line_length"):
            CalcConfig(max_line_length=0)
        with pytest.raises(ConfigError, match="Unknown log level"):
            CalcConfig(log_level="LOUD")


class TestFile:
    def test_explicit_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            """
[calcula]
precision = 3
strict = true
max_line_length = 80
prompt = "> "
log_level = "DEBUG"
""",
        )
        config = load_config(path)
        assert config.precision == 3
        assert config.strict is True
        assert config.max_line_length == 80
        assert config.prompt == "> "
        assert config.log_level == "DEBUG"

    def test_file_in_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write(tmp_path, "[calcula]\nprecision = 2\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().precision == 2

    def test_missing_section_uses_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[other]\nkey = 1\n")
        assert load_config(path) == CalcConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[calcula\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_wrong_types(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="precision must be an integer"):
            load_config(_write(tmp_path, '[calcula]\nprecision = "many"\n'))
        with pytest.raises(ConfigError, match="strict must be true or false"):
            load_config(_write(tmp_path, '[calcula]\nstrict = "yes"\n'))


class TestEnvironment:
    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write(tmp_path, "[calcula]\nprecision = 3\n")
        monkeypatch.setenv("CALCULA_PRECISION", "8")
        monkeypatch.setenv("CALCULA_MAX_LINE", "100")
        monkeypatch.setenv("CALCULA_LOG_LEVEL", "info")
        monkeypatch.setenv("CALCULA_STRICT", "yes")
        config = load_config(path)
        assert config.precision == 8
        assert config.max_line_length == 100
        assert config.log_level == "INFO"
        assert config.strict is True

    def test_bad_number(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CALCULA_MAX_LINE", "lots")
        with pytest.raises(ConfigError, match="CALCULA_MAX_LINE"):
            load_config()

    def test_unknown_strict_value_warns(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CALCULA_STRICT", "maybe")
        with caplog.at_level(logging.WARNING, logger="calcula"):
            config = load_config()
        assert config.strict is False
        assert "Unknown CALCULA_STRICT value" in caplog.text
