"""System-level infrastructure helpers."""

from ledger.infrastructure.system.logging_setup import configure_logging

__all__ = ["configure_logging"]
