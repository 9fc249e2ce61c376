"""Infrastructure providers."""

# Import bases
from .backend import BackendProvider

# Import implementations (needed for __subclasses__())
from .backend import ProdBackendProvider  # noqa: F401

__all__ = [
    "BackendProvider",
    "ProdBackendProvider",
]
