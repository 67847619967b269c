"""Telemetry: logging setup."""

from contact_manager.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
