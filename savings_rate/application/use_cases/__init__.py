"""Application use cases package."""

from .get_expense_breakdown import ExpenseBreakdown, GetExpenseBreakdownUseCase
from .get_savings_rate import GetSavingsRateUseCase, SavingsRateSummary

__all__ = [
    "ExpenseBreakdown",
    "GetExpenseBreakdownUseCase",
    "GetSavingsRateUseCase",
    "SavingsRateSummary",
]
