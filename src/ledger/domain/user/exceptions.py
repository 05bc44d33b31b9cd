"""User domain exceptions."""

from ledger.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    StorageError,
)


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            message=f"User {user_id} not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )
        self.user_id = user_id


class UserAlreadyExistsError(ConflictError):
    """Raised when creating a user whose id is already taken."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            message=f"User {user_id} already exists",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details={"user_id": user_id},
        )
        self.user_id = user_id


class UserStorageError(StorageError):
    """Raised when the user store fails."""

    def __init__(self, operation: str, user_id: str) -> None:
        super().__init__(
            message=f"Unable to {operation} for user {user_id}",
            details={"operation": operation, "user_id": user_id},
        )
        self.operation = operation
        self.user_id = user_id
