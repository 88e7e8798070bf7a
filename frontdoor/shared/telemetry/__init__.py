"""Telemetry: logging setup shared by the web front-end and the runner."""

from frontdoor.shared.telemetry.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
