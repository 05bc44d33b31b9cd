"""Application layer ports (aka interfaces)."""

from ledger.application.ports.system import HealthCheckPort

__all__ = ["HealthCheckPort"]
