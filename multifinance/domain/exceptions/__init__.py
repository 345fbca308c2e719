"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, NotFoundException, BusinessRuleException
from .not_found import (
    ConsumerNotFoundException,
    MerchantNotFoundException,
    LimitNotFoundException,
    LoanNotFoundException,
)
from .credit import (
    InvalidTenureException,
    InvalidPaymentTypeException,
    InsufficientLimitException,
    LoanAlreadyFinishedException,
    LoanOwnershipMismatchException,
    DuplicateConsumerException,
    InvalidRequestException,
)
from .storage import OperationTimeoutException

__all__ = [
    "DomainException",
    "NotFoundException",
    "BusinessRuleException",
    "ConsumerNotFoundException",
    "MerchantNotFoundException",
    "LimitNotFoundException",
    "LoanNotFoundException",
    "InvalidTenureException",
    "InvalidPaymentTypeException",
    "InsufficientLimitException",
    "LoanAlreadyFinishedException",
    "LoanOwnershipMismatchException",
    "DuplicateConsumerException",
    "InvalidRequestException",
    "OperationTimeoutException",
]
