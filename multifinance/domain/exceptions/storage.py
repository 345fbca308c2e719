"""Infrastructure-facing exceptions surfaced through the domain."""

from .base import DomainException


class OperationTimeoutException(DomainException):
    """Raised when a use case exceeds its deadline."""

    def __init__(self, operation: str, timeout: float):
        super().__init__(
            message=f"Operation {operation} exceeded its {timeout:g}s deadline",
            code="OPERATION_TIMEOUT",
        )
        self.operation = operation
        self.timeout = timeout
