"""Composition root for wiring infrastructure adapters."""

from savings_rate.application.ports.ledger_report import LedgerReportPort
from savings_rate.application.use_cases.get_expense_breakdown import (
    GetExpenseBreakdownUseCase,
)
from savings_rate.application.use_cases.get_savings_rate import (
    GetSavingsRateUseCase,
)
from savings_rate.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from savings_rate.infrastructure.logging.logger import get_app_logger
from savings_rate.infrastructure.settings import HledgerSettings


def build_settings() -> HledgerSettings:
    """Return settings sourced from the environment."""
    return HledgerSettings.from_env()


def build_ledger_repository(
    settings: HledgerSettings | None = None,
) -> LedgerReportPort:
    """Return the configured ledger repository."""
    return create_ledger_repository(
        settings or build_settings(),
        logger=get_app_logger(),
    )


def build_savings_rate_use_case(
    settings: HledgerSettings | None = None,
    ledger_repository: LedgerReportPort | None = None,
) -> GetSavingsRateUseCase:
    """Return the savings-rate use case wired to hledger."""
    resolved_settings = settings or build_settings()
    return GetSavingsRateUseCase(
        ledger_repository or build_ledger_repository(resolved_settings),
        logger=get_app_logger(),
        invert_income=resolved_settings.invert_income,
    )


def build_expense_breakdown_use_case(
    settings: HledgerSettings | None = None,
    ledger_repository: LedgerReportPort | None = None,
) -> GetExpenseBreakdownUseCase:
    """Return the expense breakdown use case wired to hledger."""
    return GetExpenseBreakdownUseCase(
        ledger_repository or build_ledger_repository(settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_ledger_repository",
    "build_savings_rate_use_case",
    "build_expense_breakdown_use_case",
]
