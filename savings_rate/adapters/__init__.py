"""Adapters package: CLI and user interfaces."""
