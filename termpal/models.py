"""Common types and errors."""

from enum import StrEnum

__all__ = [
    "HEX_LEN",
    "HEX_LEN_HASH",
    "PALETTE_SIZE",
    "Backend",
    "Color",
    "ConfigInvalid",
    "DecodeFailure",
    "EmptyInput",
    "InsufficientPalette",
    "NoImageSelected",
    "QuantizationFailure",
    "TermpalError",
]

Color = tuple[int, int, int]

HEX_LEN = 6
HEX_LEN_HASH = 7

PALETTE_SIZE = 8


class Backend(StrEnum):
    """Quantization strategy used to reduce the samples to a palette."""

    KMEANS = "kmeans"
    THIEF = "thief"

    @classmethod
    def from_name(cls, name: str) -> "Backend":
        """Return the backend matching `name`, defaulting to k-means.

        Args:
            name: backend name, as found in the settings file or on the command line
        """
        if name in {"thief", "colorthief", "ColorThief"}:
            return cls.THIEF
        return cls.KMEANS


class TermpalError(Exception):
    """Base class for errors ending a colorscheme generation."""


class DecodeFailure(TermpalError):
    """The image could not be read or is in an unsupported format."""


class EmptyInput(TermpalError):
    """The HSV filters removed every sample."""


class QuantizationFailure(TermpalError):
    """The quantization backend failed to produce a palette."""


class InsufficientPalette(TermpalError):
    """The palette holds fewer colors than the colorscheme needs."""


class ConfigInvalid(TermpalError):
    """The settings failed validation."""


class NoImageSelected(TermpalError):
    """No image path was given, or the directory holds no image."""
