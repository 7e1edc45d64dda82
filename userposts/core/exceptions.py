"""Domain errors raised by handlers and translated by the API's exception handlers."""

from dataclasses import dataclass
from typing import List


@dataclass
class Violation:
    field: str
    message: str

    def __str__(self):
        return f"{self.field}: {self.message}"


class DomainError(Exception):
    """Base class for application-level failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFound(DomainError):
    """The requested id does not exist in its collection."""


class ValidationFailed(DomainError):
    """A payload failed one or more declared constraints."""

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        super().__init__("Validation failed")

    @property
    def details(self) -> str:
        return "; ".join(str(v) for v in self.violations)
