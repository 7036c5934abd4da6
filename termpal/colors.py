"""Color conversions shared by the pipeline stages."""

import colorsys

import numpy as np

from .models import HEX_LEN, HEX_LEN_HASH, Color

__all__ = [
    "WHITE",
    "hex_to_rgb",
    "hsv_to_rgb",
    "lab_to_rgb",
    "linear_blend",
    "rgb_to_hsv",
    "rgb_to_lab",
    "to_hex",
]

WHITE: Color = (255, 255, 255)

SRGB_LINEAR_CUTOFF = 0.04045
SRGB_R_CUTOFF = 0.0031308

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3


def to_hex(red: int, green: int, blue: int) -> str:
    """Convert integer rgb to hex.

    Args:
        red: Red component (0-255)
        green: Green component (0-255)
        blue: Blue component (0-255)
    """
    return f"#{red:02x}{green:02x}{blue:02x}"


def hex_to_rgb(hex_color: str) -> Color:
    """Convert a `#RRGGBB` string to an RGB tuple.

    Args:
        hex_color: Hex color string, the leading '#' is mandatory

    Raises:
        ValueError: if the string is not a valid hex color
    """
    if len(hex_color) != HEX_LEN_HASH or not hex_color.startswith("#"):
        msg = f"Invalid hex color format: {hex_color}"
        raise ValueError(msg)
    color = hex_color[1:]
    if len(color) != HEX_LEN:
        msg = f"Invalid hex color format: {hex_color}"
        raise ValueError(msg)
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def rgb_to_hsv(color: Color) -> tuple[float, float, float]:
    """Return (hue, saturation, value), hue in degrees [0, 360), others in [0, 1].

    Args:
        color: 8-bit RGB color
    """
    h, s, v = colorsys.rgb_to_hsv(color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)
    return h * 360.0, s, v


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """Convert HSV back to 8-bit RGB, rounding each channel.

    Args:
        hue: Hue in degrees
        saturation: Saturation (0.0-1.0)
        value: Value (0.0-1.0)
    """
    r, g, b = colorsys.hsv_to_rgb((hue / 360.0) % 1.0, saturation, value)
    return round(r * 255), round(g * 255), round(b * 255)


def linear_blend(first: Color, second: Color, strength: int) -> Color:
    """Mix `second` into `first` at `strength` percent.

    Uses truncating integer division so results are stable across implementations.

    Args:
        first: Base color
        second: Color blended in
        strength: Percentage of `second` (0-100)
    """
    strength = max(0, min(100, strength))
    return (
        (first[0] * (100 - strength) + second[0] * strength) // 100,
        (first[1] * (100 - strength) + second[1] * strength) // 100,
        (first[2] * (100 - strength) + second[2] * strength) // 100,
    )


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert an (N, 3) RGB array (0-255) to CIE Lab."""
    rgb_norm = rgb.astype(np.float64) / 255.0
    mask = rgb_norm > SRGB_LINEAR_CUTOFF
    rgb_linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    r, g, b = rgb_linear[:, 0], rgb_linear[:, 1], rgb_linear[:, 2]
    x = (r * 0.4124564 + g * 0.3575761 + b * 0.1804375) / XN
    y = (r * 0.2126729 + g * 0.7151522 + b * 0.0721750) / YN
    z = (r * 0.0193339 + g * 0.1191920 + b * 0.9503041) / ZN

    fx = np.where(x > LAB_EPSILON, np.cbrt(x), (LAB_KAPPA * x + 16) / 116)
    fy = np.where(y > LAB_EPSILON, np.cbrt(y), (LAB_KAPPA * y + 16) / 116)
    fz = np.where(z > LAB_EPSILON, np.cbrt(z), (LAB_KAPPA * z + 16) / 116)

    return np.column_stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)])


def lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """Convert an (N, 3) CIE Lab array to rounded RGB (0-255, uint8)."""
    l_val, a, b = lab[:, 0], lab[:, 1], lab[:, 2]

    fy = (l_val + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx**3 > LAB_EPSILON, fx**3, (116 * fx - 16) / LAB_KAPPA) * XN
    y = np.where(l_val > LAB_KAPPA * LAB_EPSILON, fy**3, l_val / LAB_KAPPA) * YN
    z = np.where(fz**3 > LAB_EPSILON, fz**3, (116 * fz - 16) / LAB_KAPPA) * ZN

    r = x * 3.2404542 - y * 1.5371385 - z * 0.4985314
    g = -x * 0.9692660 + y * 1.8760108 + z * 0.0415560
    b_out = x * 0.0556434 - y * 0.2040259 + z * 1.0572252

    rgb_linear = np.column_stack([r, g, b_out])
    mask = rgb_linear > SRGB_R_CUTOFF
    rgb = np.where(mask, 1.055 * np.power(np.clip(rgb_linear, 0, None), 1 / 2.4) - 0.055, 12.92 * rgb_linear)

    return np.clip(np.rint(rgb * 255), 0, 255).astype(np.uint8)
