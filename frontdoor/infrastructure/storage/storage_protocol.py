"""Storage protocol used by the startup orchestrator (DIP).

The backend driver lives with the owning service; frontdoor only needs a
factory that connects using the resolved settings and a bootstrap step.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from frontdoor.core.config import Settings


class StorageProtocol(Protocol):
    """Protocol for storage backends (e.g. MongoDB at Settings.mongo_url)."""

    def bootstrap(self) -> None:
        """Create indexes and the administrator account if missing."""
        ...


# Connects to the backend; raises if the connection cannot be made.
StorageFactory = Callable[["Settings"], StorageProtocol]
