"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

from savings_rate.infrastructure import settings as settings_module
from savings_rate.infrastructure.settings import HledgerSettings


def test_from_env_defaults(monkeypatch) -> None:
    """Unset variables should fall back to defaults."""
    for name in (
        "HLEDGER_BIN",
        "LEDGER_FILE",
        "HLEDGER_COMMODITY",
        "HLEDGER_BEGIN",
        "HLEDGER_OUTPUT_FORMAT",
        "HLEDGER_TIMEOUT",
        "HLEDGER_INVERT_INCOME",
    ):
        monkeypatch.delenv(name, raising=False)

    assert HledgerSettings.from_env() == HledgerSettings()


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path) -> None:
    """Journal paths should resolve to Path instances."""
    journal = tmp_path / "main.journal"
    journal.write_text("", encoding="utf-8")
    monkeypatch.setenv("LEDGER_FILE", str(journal))

    settings = HledgerSettings.from_env()

    assert isinstance(settings.ledger_file, Path)
    assert settings.ledger_file == journal.resolve()


def test_from_env_reads_overrides(monkeypatch) -> None:
    """Environment values should override defaults."""
    monkeypatch.setenv("HLEDGER_BIN", "/opt/hledger")
    monkeypatch.setenv("HLEDGER_COMMODITY", "EUR")
    monkeypatch.setenv("HLEDGER_BEGIN", "2024-01")
    monkeypatch.setenv("HLEDGER_OUTPUT_FORMAT", " CSV ")
    monkeypatch.setenv("HLEDGER_TIMEOUT", "5")
    monkeypatch.setenv("HLEDGER_INVERT_INCOME", "no")

    settings = HledgerSettings.from_env()

    assert settings.binary == "/opt/hledger"
    assert settings.commodity == "EUR"
    assert settings.begin == "2024-01"
    assert settings.output_format == "csv"
    assert settings.timeout == 5.0
    assert settings.invert_income is False


def test_from_env_ignores_invalid_timeout(monkeypatch) -> None:
    """Unparseable or non-positive timeouts use the default."""
    monkeypatch.setenv("HLEDGER_TIMEOUT", "soon")
    assert HledgerSettings.from_env().timeout == 30.0

    monkeypatch.setenv("HLEDGER_TIMEOUT", "-1")
    assert HledgerSettings.from_env().timeout == 30.0


def test_from_env_normalizes_commodity(monkeypatch) -> None:
    """Commodity codes should be trimmed and upper-cased."""
    monkeypatch.setenv("HLEDGER_COMMODITY", " eur ")
    assert HledgerSettings.from_env().commodity == "EUR"

    monkeypatch.setenv("HLEDGER_COMMODITY", "   ")
    assert HledgerSettings.from_env().commodity == "USD"


def test_from_env_falls_back_on_unsupported_format(monkeypatch) -> None:
    """Unknown report formats should warn and use JSON."""
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setenv("HLEDGER_OUTPUT_FORMAT", "xml")

    settings = HledgerSettings.from_env()

    assert settings.output_format == "json"
    fake_logger.warning.assert_called_once()
    assert "xml" in fake_logger.warning.call_args.args[0]
