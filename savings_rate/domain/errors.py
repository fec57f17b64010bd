"""Domain error taxonomy for ledger report processing."""


class SavingsRateError(Exception):
    """Base class for errors that abort a savings-rate run."""


class FetchError(SavingsRateError, RuntimeError):
    """The external ledger query failed or exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: tuple[str, ...] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ParseError(SavingsRateError, ValueError):
    """Raw report text does not match any recognized shape."""


class StructuralError(SavingsRateError, ValueError):
    """A parsed report violates a required invariant."""


__all__ = ["SavingsRateError", "FetchError", "ParseError", "StructuralError"]
