"""
Error Handling - Status Page

Error taxonomy shared by the status page services plus the ``OperationResult``
record handlers return. Results are only ever logged; none of them is turned
into an HTTP error for the visitor.
"""

import logging
from dataclasses import dataclass
from typing import Optional


class StatusPageError(Exception):
    """Base class for status page failures."""


class UpstreamUnavailable(StatusPageError):
    """A chat, email or key-value store call failed."""

    def __init__(self, service: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.cause = cause


class ValidationSkipped(StatusPageError):
    """Empty input that is ignored instead of rejected."""

    def __init__(self, field: str):
        super().__init__(f"empty '{field}' ignored")
        self.field = field


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single handler or store operation."""

    operation: str
    ok: bool = True
    error: Optional[StatusPageError] = None

    @property
    def skipped(self) -> bool:
        return isinstance(self.error, ValidationSkipped)

    @classmethod
    def success(cls, operation: str) -> "OperationResult":
        return cls(operation=operation)

    @classmethod
    def failure(cls, operation: str, error: StatusPageError) -> "OperationResult":
        return cls(operation=operation, ok=False, error=error)

    @classmethod
    def skip(cls, operation: str, field: str) -> "OperationResult":
        return cls(operation=operation, ok=False, error=ValidationSkipped(field))

    def log(self, logger: logging.Logger) -> "OperationResult":
        if self.ok:
            logger.debug(f"{self.operation} completed")
        elif self.skipped:
            logger.debug(f"{self.operation} skipped: {self.error}")
        else:
            logger.error(f"{self.operation} failed: {self.error}")
        return self
