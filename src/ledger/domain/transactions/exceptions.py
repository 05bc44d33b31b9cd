"""Transactions domain exceptions."""

from typing import Optional

from ledger.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    StorageError,
)


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when a transaction does not exist for the requesting user.

    Ids owned by another user raise this too, so existence never leaks
    across users.
    """

    def __init__(self, transaction_id: int) -> None:
        super().__init__(
            message=f"Transaction with id {transaction_id} not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": transaction_id},
        )
        self.transaction_id = transaction_id


class TransactionStorageError(StorageError):
    """Raised when the transaction store fails while running an operation."""

    def __init__(
        self,
        operation: str,
        transaction_id: Optional[int] = None,
        user: Optional[str] = None,
    ) -> None:
        if transaction_id is not None:
            msg = f"Unable to {operation} for transaction {transaction_id}"
        elif user is not None:
            msg = f"Unable to {operation} for user {user}"
        else:
            msg = f"Unable to {operation}"
        super().__init__(
            message=msg,
            details={
                "operation": operation,
                "transaction_id": transaction_id,
                "user": user,
            },
        )
        self.operation = operation
        self.transaction_id = transaction_id
