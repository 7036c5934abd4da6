"""Backend registry for quantization strategies.

This module provides the registry for palette backends and re-exports
the base type for convenience.
"""

from ..models import Backend
from .base import QuantizerBackend

__all__ = [
    "QuantizerBackend",
    "get_available_backends",
    "get_backend",
    "register_backend",
]

# Backend registry - populated by imports below
BACKENDS: dict[str, type[QuantizerBackend]] = {}


def register_backend(cls: type[QuantizerBackend]) -> type[QuantizerBackend]:
    """Decorator to register a backend class.

    Args:
        cls: Backend class to register.

    Returns:
        The same class, unmodified.
    """
    BACKENDS[cls.name] = cls
    return cls


def get_backend(name: Backend | str) -> QuantizerBackend:
    """Get a backend instance by name.

    Args:
        name: Backend identifier.

    Raises:
        KeyError: If the backend is not registered.
    """
    key = str(name)
    if key not in BACKENDS:
        available = ", ".join(BACKENDS.keys())
        msg = f"Unknown backend '{key}'. Available: {available}"
        raise KeyError(msg)
    return BACKENDS[key]()


def get_available_backends() -> list[str]:
    """Get list of all registered backend names."""
    return list(BACKENDS.keys())


# Import backends to register them
# Cyclic import is intentional: backends import register_backend from here
# pylint: disable=wrong-import-position,cyclic-import
from . import kmeans, thief  # noqa: E402, F401
