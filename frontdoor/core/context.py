"""Startup context: resolved settings plus a bootstrapped storage backend.

Single place for the startup order (SRP): summarize settings at info, apply
the configured log level process-wide, then connect and bootstrap storage.
"""

from dataclasses import dataclass

from frontdoor.core.config import Settings, get_settings
from frontdoor.domain.enums import LogLevel
from frontdoor.infrastructure.storage import StorageFactory, StorageProtocol
from frontdoor.shared.telemetry import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass(frozen=True)
class Context:
    """Shared state handed to route handlers and the runner loop."""

    settings: Settings
    storage: StorageProtocol

    @property
    def listen_addr(self) -> str:
        return self.settings.listen_addr


def create_context(
    storage_factory: StorageFactory,
    settings: Settings | None = None,
) -> Context:
    """Build the startup context.

    The log level is applied before storage is touched so that connection
    and bootstrap output honours the configured severity. Errors from the
    storage factory or bootstrap propagate unchanged.

    Args:
        storage_factory: Connects to storage using the resolved settings.
        settings: Already resolved settings; get_settings() when None.

    Returns:
        Context with settings and a bootstrapped storage backend.
    """
    if settings is None:
        settings = get_settings()

    # The summary is logged at info regardless of the configured level.
    setup_logging(LogLevel.INFO)
    logger.info(
        "Initializing with loaded settings: %s",
        ", ".join(f"{key}={value}" for key, value in settings.summary().items()),
    )

    setup_logging(settings.log_level)

    storage = storage_factory(settings)
    storage.bootstrap()
    logger.info("Storage bootstrapped at %s", settings.mongo_url)

    return Context(settings=settings, storage=storage)
