"""Health check port. Interface for store reachability checks."""

from typing import Protocol


class HealthCheckPort(Protocol):
    """Port reporting whether the backing store answers requests."""

    async def check(self) -> bool:
        """Run a trivial round trip against the store.

        Returns
        -------
        True if the store answered, False otherwise
        """
        ...
