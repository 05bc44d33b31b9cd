"""System ports. Store health and maintenance operations."""

from ledger.application.ports.system.health_check_port import HealthCheckPort

__all__ = ["HealthCheckPort"]
