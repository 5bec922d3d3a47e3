"""Custom exceptions for nfasim."""

from typing import List


class NfaSimError(Exception):
    """Base exception for all nfasim errors."""

    pass


class LoadError(NfaSimError):
    """Raised when an automaton description cannot be loaded."""

    def __init__(self, message: str, line: int = 0) -> None:
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line > 0:
            return f"{super().__str__()} at line {self.line}"
        return super().__str__()


class AutomatonValidationError(NfaSimError):
    """Raised when a complete automaton definition fails validation."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid automaton")
