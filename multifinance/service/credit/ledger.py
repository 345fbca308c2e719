"""
Limit Ledger for the Multifinance credit engine.

Exposure is tracked per credit line (one consumer, one tenure), not
globally per consumer: only unfinished loans drawn on the same limit
count against it.
"""

from typing import Iterable

from multifinance.domain.entities import ConsumerLimit, Loan


def calculate_exposure_cents(loans: Iterable[Loan], consumer_limit_id: int) -> int:
    """
    Sum the outstanding principal drawn on one credit line.

    Args:
        loans: Loans of the consumer (any limit, any status)
        consumer_limit_id: The credit line to compute exposure for

    Returns:
        Outstanding principal in cents of every unfinished loan that
        belongs to the credit line
    """
    return sum(
        loan.outstanding_principal_cents
        for loan in loans
        if not loan.is_finished and loan.consumer_limit_id == consumer_limit_id
    )


def calculate_remaining_limit_cents(
    consumer_limit: ConsumerLimit,
    loans: Iterable[Loan],
) -> int:
    """
    Compute how much of a credit line is still free.

    Args:
        consumer_limit: The credit line
        loans: Loans of the consumer

    Returns:
        limit minus exposure, in cents
    """
    return consumer_limit.limit_cents - calculate_exposure_cents(loans, consumer_limit.id)
