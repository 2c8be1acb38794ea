"""Tests for environment-driven settings."""

import pytest

from figma2html.config import DEFAULT_FILE_KEY, Settings
from figma2html.errors import ConfigError

ENV_VARS = ("FIGMA_TOKEN", "FIGMA_FILE_KEY", "FRAME_NAME", "OUTPUT_DIR")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # set-then-delete so teardown also drops anything load_dotenv adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # empty .env so a developer's real one is never picked up
    dotenv = tmp_path / ".env"
    dotenv.write_text("")
    return dotenv


class TestSettingsFromEnv:
    def test_defaults(self, clean_env, monkeypatch):
        monkeypatch.setenv("FIGMA_TOKEN", "tok")
        settings = Settings.from_env(clean_env)
        assert settings == Settings(token="tok", file_key=DEFAULT_FILE_KEY, frame_name=None, output_dir="output")

    def test_reads_all_variables(self, clean_env, monkeypatch):
        monkeypatch.setenv("FIGMA_TOKEN", "tok")
        monkeypatch.setenv("FIGMA_FILE_KEY", "KEY")
        monkeypatch.setenv("FRAME_NAME", "Login")
        monkeypatch.setenv("OUTPUT_DIR", "dist")
        settings = Settings.from_env(clean_env)
        assert (settings.file_key, settings.frame_name, settings.output_dir) == ("KEY", "Login", "dist")

    def test_overrides_win(self, clean_env, monkeypatch):
        monkeypatch.setenv("FIGMA_TOKEN", "tok")
        monkeypatch.setenv("FRAME_NAME", "Login")
        settings = Settings.from_env(clean_env, frame_name="Settings", output_dir=None)
        assert settings.frame_name == "Settings"
        assert settings.output_dir == "output"

    def test_dotenv_file(self, clean_env):
        clean_env.write_text("FIGMA_TOKEN=from-file\nFIGMA_FILE_KEY=FILEKEY\n")
        settings = Settings.from_env(clean_env)
        assert settings.token == "from-file"
        assert settings.file_key == "FILEKEY"

    def test_missing_token(self, clean_env):
        with pytest.raises(ConfigError):
            Settings.from_env(clean_env)
