"""Not-found exceptions for credit entities."""

from .base import NotFoundException


class ConsumerNotFoundException(NotFoundException):
    def __init__(self, consumer_id: int):
        super().__init__(
            message=f"Consumer not found: {consumer_id}",
            code="CONSUMER_NOT_FOUND",
        )
        self.consumer_id = consumer_id


class MerchantNotFoundException(NotFoundException):
    def __init__(self, merchant_id: int):
        super().__init__(
            message=f"Merchant not found: {merchant_id}",
            code="MERCHANT_NOT_FOUND",
        )
        self.merchant_id = merchant_id


class LimitNotFoundException(NotFoundException):
    """Raised when no live credit line matches the lookup."""

    def __init__(self, consumer_id: int | None = None, tenure: int | None = None, limit_id: int | None = None):
        if limit_id is not None:
            message = f"Consumer limit not found: {limit_id}"
        else:
            message = f"Consumer limit not found for consumer {consumer_id} and tenure {tenure}"
        super().__init__(message=message, code="LIMIT_NOT_FOUND")
        self.consumer_id = consumer_id
        self.tenure = tenure
        self.limit_id = limit_id


class LoanNotFoundException(NotFoundException):
    def __init__(self, loan_id: int):
        super().__init__(
            message=f"Loan not found: {loan_id}",
            code="LOAN_NOT_FOUND",
        )
        self.loan_id = loan_id
