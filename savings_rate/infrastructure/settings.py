"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from savings_rate.domain.constants import DEFAULT_COMMODITY
from savings_rate.domain.services.normalization import normalize_commodity_code
from savings_rate.infrastructure.logging.logger import get_app_logger

SUPPORTED_OUTPUT_FORMATS = ("json", "csv")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class HledgerSettings:
    """Settings for invoking hledger.

    Attributes:
        binary: Executable name or path of hledger.
        ledger_file: Optional journal passed with ``-f``.
        commodity: Commodity every query is converted to.
        begin: Start of the multi-period reports (hledger period expression).
        output_format: Report encoding requested from hledger.
        timeout: Seconds before a query is abandoned.
        invert_income: Whether income is queried with ``--invert``.
    """

    binary: str = "hledger"
    ledger_file: Optional[Path] = None
    commodity: str = DEFAULT_COMMODITY
    begin: str = "lastquarter"
    output_format: str = "json"
    timeout: float = 30.0
    invert_income: bool = True

    @classmethod
    def from_env(cls) -> "HledgerSettings":
        """Build settings from environment variables.

        Returns:
            HledgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_ledger = os.getenv("LEDGER_FILE")
        ledger_file = (
            cls._normalize_path(raw_ledger, logger=logger)
            if raw_ledger
            else None
        )
        return cls(
            binary=os.getenv("HLEDGER_BIN", "hledger").strip() or "hledger",
            ledger_file=ledger_file,
            commodity=(
                normalize_commodity_code(os.getenv("HLEDGER_COMMODITY"))
                or DEFAULT_COMMODITY
            ),
            begin=os.getenv("HLEDGER_BEGIN", "lastquarter").strip()
            or "lastquarter",
            output_format=cls._parse_output_format(
                os.getenv("HLEDGER_OUTPUT_FORMAT"),
                logger=logger,
            ),
            timeout=cls._parse_timeout(
                os.getenv("HLEDGER_TIMEOUT"),
                logger=logger,
            ),
            invert_income=os.getenv("HLEDGER_INVERT_INCOME", "true")
            .strip()
            .lower()
            in _TRUE_VALUES,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the journal path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute journal path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger file does not exist at {path}")
        return path

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the query timeout, falling back to the default.

        Args:
            raw_value: Raw timeout in seconds.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        default = HledgerSettings.timeout
        if not raw_value:
            return default
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid HLEDGER_TIMEOUT '{raw_value}'; using {default}"
            )
            return default
        if value <= 0:
            logger.warning(
                f"HLEDGER_TIMEOUT must be positive; using {default}"
            )
            return default
        return value

    @staticmethod
    def _parse_output_format(raw_value: str | None, logger) -> str:
        """Parse the report format, falling back to the default.

        Args:
            raw_value: Raw format name.
            logger: Logger used for warnings.

        Returns:
            str: One of ``SUPPORTED_OUTPUT_FORMATS``.
        """
        default = HledgerSettings.output_format
        if not raw_value or not raw_value.strip():
            return default
        value = raw_value.strip().lower()
        if value not in SUPPORTED_OUTPUT_FORMATS:
            logger.warning(
                f"Unsupported HLEDGER_OUTPUT_FORMAT '{raw_value}'; "
                f"using {default}"
            )
            return default
        return value


__all__ = ["HledgerSettings", "SUPPORTED_OUTPUT_FORMATS"]
