"""
Pytest configuration for integration tests.

Integration tests use Testcontainers for an ephemeral PostgreSQL instance.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import postgres_container, postgres_engine

__all__ = ["postgres_container", "postgres_engine"]
