"""Domain services for installment chains."""

from dataclasses import replace

from axis_finance.domain.constants import TransactionStatus
from axis_finance.domain.errors import DomainValidationError
from axis_finance.domain.models import Transaction
from axis_finance.utils.dates import add_months


def build_installment_chain(
    base: Transaction,
    installments: int,
    parent_id: str | None = None,
) -> list[Transaction]:
    """Split a purchase into monthly installment records.

    The first record keeps the caller's status. The following records are
    pending and dated on successive months.

    Args:
        base: Transaction describing one installment.
        installments: Number of installments, at least 2.
        parent_id: Identifier of the persisted first installment, set on
            records 2..N when known.

    Returns:
        list[Transaction]: The installment records, first one first.

    Raises:
        DomainValidationError: If fewer than two installments are requested.
    """
    if isinstance(installments, bool) or not isinstance(installments, int):
        raise DomainValidationError("installments must be an integer")
    if installments < 2:
        raise DomainValidationError(
            f"An installment chain needs at least 2 installments: {installments}"
        )
    chain = [
        replace(
            base,
            id=None,
            parent_transaction_id=None,
            installment_number=1,
            total_installments=installments,
        )
    ]
    for number in range(2, installments + 1):
        chain.append(
            replace(
                base,
                id=None,
                date=add_months(base.date, number - 1),
                status=TransactionStatus.PENDING,
                parent_transaction_id=parent_id,
                installment_number=number,
                total_installments=installments,
            )
        )
    return chain


__all__ = ["build_installment_chain"]
