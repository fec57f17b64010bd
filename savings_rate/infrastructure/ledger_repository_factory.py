"""Factory helpers to configure the ledger report repository."""

from dataclasses import replace

from savings_rate.application.ports.ledger_report import LedgerReportPort
from savings_rate.infrastructure.hledger_repository import (
    HledgerLedgerRepository,
)
from savings_rate.infrastructure.logging.logger import get_app_logger
from savings_rate.infrastructure.settings import (
    SUPPORTED_OUTPUT_FORMATS,
    HledgerSettings,
)


def create_ledger_repository(
    settings: HledgerSettings | None = None,
    logger=None,
    output_format: str | None = None,
) -> LedgerReportPort:
    """Return a ledger repository based on configuration.

    Args:
        settings: Optional settings; read from the environment when omitted.
        logger: Optional logger compatible with logging.Logger-like API.
        output_format: Optional report format override (json or csv).

    Returns:
        LedgerReportPort: Concrete repository implementation.

    Raises:
        ValueError: If the output format is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or HledgerSettings.from_env()
    selected_format = (
        output_format or resolved_settings.output_format
    ).strip().lower()

    if selected_format not in SUPPORTED_OUTPUT_FORMATS:
        raise ValueError(
            "Unsupported hledger output format: "
            f"{selected_format}. Expected json or csv."
        )
    if selected_format == "csv":
        resolved_logger.info("Reading hledger reports in legacy CSV format")
    return HledgerLedgerRepository(
        replace(resolved_settings, output_format=selected_format),
        logger=resolved_logger,
    )


__all__ = ["create_ledger_repository"]
