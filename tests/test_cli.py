"""CLI tests."""

import logging

import pytest
from click.testing import CliRunner

from localetable.cli import main
from localetable.tracing import setup_tracing


@pytest.fixture
def cfg_file(tmp_path):
    path = tmp_path / "LocaleData.cfg"
    path.write_text('SectionLang = en\n[Hello]\nes = "Hola"\nde = "Hallo"\n', encoding="utf-8")
    return path


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setenv("LOCALETABLE_TRACING_ENABLED", "false")
    monkeypatch.delenv("LOCALETABLE_LANGUAGE", raising=False)
    return CliRunner()


class TestLookupCommand:
    """`localetable lookup` tests."""

    def test_lookup_with_lang(self, runner, cfg_file):
        result = runner.invoke(main, ["lookup", "Hello", "--file", str(cfg_file), "--lang", "de"])
        assert result.exit_code == 0
        assert "Hallo" in result.output

    def test_lookup_with_configured_language(self, runner, cfg_file, monkeypatch):
        monkeypatch.setenv("LOCALETABLE_LANGUAGE", "es")
        result = runner.invoke(main, ["lookup", "Hello", "--file", str(cfg_file)])
        assert result.exit_code == 0
        assert "Hola" in result.output

    def test_lookup_default_file_from_settings(self, runner, cfg_file, monkeypatch):
        monkeypatch.setenv("LOCALETABLE_LOCALE_FILE", str(cfg_file))
        result = runner.invoke(main, ["lookup", "Hello", "--lang", "en"])
        assert result.exit_code == 0
        assert "Hello" in result.output

    def test_lookup_missing_key(self, runner, cfg_file):
        result = runner.invoke(main, ["lookup", "Missing", "--file", str(cfg_file), "--lang", "de"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_lookup_missing_file(self, runner, tmp_path):
        missing = tmp_path / "missing.cfg"
        result = runner.invoke(main, ["lookup", "Hello", "--file", str(missing), "--lang", "de"])
        assert result.exit_code == 1
        assert "Invalid .cfg" in result.output


class TestDetectCommand:
    """`localetable detect` tests."""

    def test_detect_configured_language(self, runner, monkeypatch):
        monkeypatch.setenv("LOCALETABLE_LANGUAGE", "fr")
        result = runner.invoke(main, ["detect"])
        assert result.exit_code == 0
        assert result.output.strip() == "fr"


class TestTracingSetting:
    """LOCALETABLE_TRACING_ENABLED controls console logging."""

    @pytest.fixture(autouse=True)
    def quiet_after(self):
        yield
        setup_tracing(console=False)

    def _console_handlers(self):
        return [
            h for h in logging.getLogger("localetable").handlers
            if isinstance(h, logging.StreamHandler)
        ]

    def test_disabled_tracing_prints_no_load_events(self, runner, cfg_file):
        setup_tracing()
        result = runner.invoke(main, ["lookup", "Hello", "--file", str(cfg_file), "--lang", "de"])

        assert result.exit_code == 0
        assert result.output.strip() == "Hallo"
        assert self._console_handlers() == []

    def test_enabled_tracing_logs_to_stderr(self, runner, cfg_file, monkeypatch):
        setup_tracing(console=False)
        monkeypatch.setenv("LOCALETABLE_TRACING_ENABLED", "true")
        result = runner.invoke(main, ["lookup", "Hello", "--file", str(cfg_file), "--lang", "de"])

        assert result.exit_code == 0
        assert "load_complete" in result.output
        assert len(self._console_handlers()) == 1
