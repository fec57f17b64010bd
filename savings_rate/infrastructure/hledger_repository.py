"""hledger-backed implementation of the ledger report port."""

import subprocess

from savings_rate.domain.constants import (
    DEFAULT_EXPENSE_PREFIX,
    DEFAULT_LIABILITY_PREFIX,
)
from savings_rate.domain.errors import FetchError
from savings_rate.domain.models.report import PeriodReport, SinglePeriodListing
from savings_rate.domain.services.legacy_csv import (
    parse_balance_listing_csv,
    parse_period_report_csv,
)
from savings_rate.domain.services.normalization import parse_liabilities_text
from savings_rate.domain.services.parsing import (
    parse_balance_listing,
    parse_period_report,
)
from savings_rate.domain.services.validation import warn_on_mixed_commodities
from savings_rate.infrastructure.logging.logger import get_app_logger
from savings_rate.infrastructure.settings import HledgerSettings


class HledgerLedgerRepository:
    """Run hledger balance queries and parse their output."""

    def __init__(
        self,
        settings: HledgerSettings | None = None,
        logger=None,
        expense_prefix: str = DEFAULT_EXPENSE_PREFIX,
        liability_prefix: str = DEFAULT_LIABILITY_PREFIX,
    ) -> None:
        """Initialize the repository.

        Args:
            settings: hledger invocation settings.
            logger: Optional logger compatible with logging.Logger-like API.
            expense_prefix: Root account of the monthly expense listing.
            liability_prefix: Account pattern summed as liabilities.
        """
        self._settings = settings or HledgerSettings()
        self._logger = logger or get_app_logger()
        self._expense_prefix = expense_prefix
        self._liability_prefix = liability_prefix

    @property
    def commodity(self) -> str:
        return self._settings.commodity

    def _base_command(self) -> list[str]:
        command = [self._settings.binary]
        if self._settings.ledger_file is not None:
            command += ["-f", str(self._settings.ledger_file)]
        return command

    def build_period_command(
        self,
        account_prefix: str,
        invert: bool = False,
    ) -> list[str]:
        """Return the monthly balance query for an account prefix."""
        command = self._base_command() + [
            "bal",
            f"^{account_prefix}",
            "-O",
            self._settings.output_format,
            "-M",
            "-b",
            self._settings.begin,
            "-C",
            "-U",
            "-T",
            "-X",
            self._settings.commodity,
        ]
        if invert:
            command.append("--invert")
        return command

    def build_expense_listing_command(self) -> list[str]:
        """Return the current-month expenses query."""
        return self._base_command() + [
            "bal",
            f"^{self._expense_prefix}",
            "--begin",
            "thismonth",
            "-O",
            self._settings.output_format,
            "-X",
            self._settings.commodity,
        ]

    def build_liabilities_command(self) -> list[str]:
        """Return the liabilities total query."""
        return self._base_command() + [
            "bal",
            self._liability_prefix,
            "--format",
            "%(total)",
            "-X",
            self._settings.commodity,
        ]

    def _run(self, command: list[str]) -> str:
        """Run an hledger command and return its standard output.

        Raises:
            FetchError: If hledger is missing, fails or times out.
        """
        self._logger.debug(f"Running {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._settings.timeout,
                check=True,
            )
        except FileNotFoundError as exc:
            raise FetchError(
                f"hledger executable not found: {command[0]}",
                command=tuple(command),
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            raise FetchError(
                f"hledger exited with status {exc.returncode}: {stderr}",
                command=tuple(command),
                returncode=exc.returncode,
                stderr=stderr,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise FetchError(
                f"hledger timed out after {self._settings.timeout}s",
                command=tuple(command),
            ) from exc
        return result.stdout

    def fetch_period_report(
        self,
        account_prefix: str,
        invert: bool = False,
    ) -> PeriodReport:
        """Return the monthly report of accounts under ``account_prefix``."""
        raw = self._run(self.build_period_command(account_prefix, invert))
        if self._settings.output_format == "csv":
            report = parse_period_report_csv(raw, self._settings.commodity)
        else:
            report = parse_period_report(raw, self._settings.commodity)
        warn_on_mixed_commodities(report, account_prefix, self._logger)
        self._logger.info(
            f"Fetched {account_prefix} report with "
            f"{report.period_count()} periods and {len(report.rows)} accounts"
        )
        return report

    def fetch_expense_listing(self) -> SinglePeriodListing:
        """Return the current month's expenses per account."""
        raw = self._run(self.build_expense_listing_command())
        if self._settings.output_format == "csv":
            listing = parse_balance_listing_csv(
                raw,
                self._settings.commodity,
                logger=self._logger,
            )
        else:
            listing = parse_balance_listing(raw, logger=self._logger)
        self._logger.info(
            f"Fetched expense listing with {len(listing.accounts())} accounts"
        )
        return listing

    def fetch_liabilities(self) -> float:
        """Return the current liabilities total."""
        raw = self._run(self.build_liabilities_command())
        liabilities = parse_liabilities_text(raw, self._settings.commodity)
        self._logger.info(f"Fetched liabilities total: {liabilities}")
        return liabilities


__all__ = ["HledgerLedgerRepository"]
