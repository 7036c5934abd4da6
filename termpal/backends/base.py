"""Base class for quantization backends.

This module is separate from __init__.py to avoid cyclic imports when
backends import it.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar

from ..models import Color

__all__ = ["QuantizerBackend"]


class QuantizerBackend(ABC):
    """Abstract base class for quantization backends.

    Each backend reduces a list of sRGB samples to at most `count`
    representative colors. Instances hold no state between calls.

    Class Attributes:
        name: Unique identifier for the backend, matching a `Backend` value.
    """

    name: ClassVar[str]

    @abstractmethod
    def generate_palette(self, colors: Sequence[Color], count: int) -> list[Color] | None:
        """Reduce `colors` to a palette.

        Args:
            colors: Normalized sRGB samples
            count: Desired palette size

        Returns:
            At most `count` colors, or None if the samples are empty or the
            quantizer failed.
        """
        ...
