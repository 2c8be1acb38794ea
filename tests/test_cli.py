"""Tests for the figma2html CLI."""

import pytest
from click.testing import CliRunner

from figma2html import __version__
from figma2html.cli import cli


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setattr("figma2html.config.load_dotenv", lambda *args, **kwargs: False)
    for name in ("FIGMA_FILE_KEY", "FRAME_NAME", "OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FIGMA_TOKEN", "tok")
    return monkeypatch


@pytest.fixture
def fake_client(env, file_json):
    class FakeClient:
        instances = []

        def __init__(self, token):
            self.token = token
            self.keys = []
            FakeClient.instances.append(self)

        def get_file(self, file_key):
            self.keys.append(file_key)
            return file_json

    env.setattr("figma2html.generate.FigmaClient", FakeClient)
    env.setattr("figma2html.cli.FigmaClient", FakeClient)
    return FakeClient


class TestVersion:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestGenerateCommand:
    def test_writes_output(self, fake_client, tmp_path):
        out = tmp_path / "site"
        result = CliRunner().invoke(cli, ["generate", "--file-key", "KEY", "--out", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "index.html").exists()
        assert (out / "styles.css").exists()
        assert fake_client.instances[0].token == "tok"
        assert fake_client.instances[0].keys == ["KEY"]
        assert "Wrote" in result.output

    def test_missing_frame_fails(self, fake_client, tmp_path):
        result = CliRunner().invoke(cli, ["generate", "--frame", "Nope", "--out", str(tmp_path / "x")])
        assert result.exit_code == 1
        assert "Frame 'Nope' not found" in result.output

    def test_missing_token_fails(self, env, tmp_path):
        env.delenv("FIGMA_TOKEN")
        result = CliRunner().invoke(cli, ["generate", "--out", str(tmp_path)])
        assert result.exit_code == 1
        assert "FIGMA_TOKEN" in result.output


class TestFramesCommand:
    def test_lists_frames(self, fake_client):
        result = CliRunner().invoke(cli, ["frames"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["Page 1\t1:2\tLogin", "Page 1\t2:1\tSettings"]
