"""Infrastructure providers."""

# Import bases
from .media import MediaProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .media import ProdMediaProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "MediaProvider",
    "PersistenceProvider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
]
