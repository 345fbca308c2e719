"""Credit rule violations raised by origination and payment processing."""

from .base import BusinessRuleException


class InvalidTenureException(BusinessRuleException):
    def __init__(self, tenure: int):
        super().__init__(
            message=f"Invalid tenure: {tenure}",
            code="INVALID_TENURE",
        )
        self.tenure = tenure


class InvalidPaymentTypeException(BusinessRuleException):
    def __init__(self, payment_type: str):
        super().__init__(
            message="payment_type must be installment or full",
            code="INVALID_PAYMENT_TYPE",
        )
        self.payment_type = payment_type


class InsufficientLimitException(BusinessRuleException):
    """Raised when a requested principal exceeds the remaining limit."""

    def __init__(self, requested_cents: int, remaining_cents: int):
        super().__init__(
            message=f"Insufficient limit, remaining limit: {remaining_cents / 100:.2f}",
            code="INSUFFICIENT_LIMIT",
        )
        self.requested_cents = requested_cents
        self.remaining_cents = remaining_cents


class LoanAlreadyFinishedException(BusinessRuleException):
    def __init__(self, loan_id: int):
        super().__init__(
            message=f"Loan already finished: {loan_id}",
            code="LOAN_ALREADY_FINISHED",
        )
        self.loan_id = loan_id


class LoanOwnershipMismatchException(BusinessRuleException):
    def __init__(self, loan_id: int, consumer_id: int):
        super().__init__(
            message=f"Loan {loan_id} does not belong to consumer {consumer_id}",
            code="LOAN_OWNERSHIP_MISMATCH",
        )
        self.loan_id = loan_id
        self.consumer_id = consumer_id


class DuplicateConsumerException(BusinessRuleException):
    def __init__(self, nik: str):
        super().__init__(
            message=f"Consumer with NIK {nik} already exists",
            code="DUPLICATE_CONSUMER",
        )
        self.nik = nik


class InvalidRequestException(BusinessRuleException):
    """Raised when a use-case request fails field validation."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_REQUEST")
