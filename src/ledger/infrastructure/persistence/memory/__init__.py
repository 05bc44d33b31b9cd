"""In-memory repository implementations (volatile, for tests and development)."""

from ledger.infrastructure.persistence.memory.health_check import (
    InMemoryHealthCheck,
)
from ledger.infrastructure.persistence.memory.rw_lock import (
    LockTimeoutError,
    ReadWriteLock,
)
from ledger.infrastructure.persistence.memory.transaction_repository import (
    TransactionRepositoryInMemory,
)
from ledger.infrastructure.persistence.memory.user_repository import (
    UserRepositoryInMemory,
)

__all__ = [
    "InMemoryHealthCheck",
    "LockTimeoutError",
    "ReadWriteLock",
    "TransactionRepositoryInMemory",
    "UserRepositoryInMemory",
]
