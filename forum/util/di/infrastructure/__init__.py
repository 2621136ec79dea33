"""Infrastructure providers."""

# Import bases
from .notify import NotificationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .notify import ProdNotificationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "NotificationProvider",
    "PersistenceProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
