"""Application ports package."""

from .ledger_report import LedgerReportPort

__all__ = ["LedgerReportPort"]
