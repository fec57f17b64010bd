"""Savings-rate metrics derived from hledger balance reports."""

__version__ = "0.1.0"
