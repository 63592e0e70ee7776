"""
Palette Harmony - Color Model Conversion

Hex <-> HSL conversion, perceived brightness and complementary colors.
All HSL values are integers: hue in degrees [0, 360), saturation and
lightness in percent [0, 100].
"""

import math
from typing import NamedTuple, Tuple


class InvalidColorError(ValueError):
    """Raised when a hex color string cannot be parsed."""


class HSL(NamedTuple):
    """Integer HSL triple."""
    h: int  # Hue [0, 360)
    s: int  # Saturation [0, 100]
    l: int  # Lightness [0, 100]


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def parse_hex(hex_color: str) -> Tuple[int, int, int]:
    """
    Parse a hex color into 8-bit RGB channels.

    Args:
        hex_color: Color as RRGGBB, optionally prefixed with '#'

    Returns:
        Tuple of (R, G, B), each in [0, 255]

    Raises:
        InvalidColorError: If the value is not a 6-digit hex color
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(f"Invalid hex color format: {hex_color!r}")

    hex_clean = hex_color[1:] if hex_color.startswith('#') else hex_color
    # int(x, 16) alone would accept signs, whitespace and underscores
    if len(hex_clean) != 6 or not all(c in HEX_DIGITS for c in hex_clean):
        raise InvalidColorError(f"Invalid hex color format: {hex_color}")

    return int(hex_clean[0:2], 16), int(hex_clean[2:4], 16), int(hex_clean[4:6], 16)


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert hex color to integer HSL.

    Args:
        hex_color: Color as RRGGBB or #RRGGBB

    Returns:
        HSL with hue in degrees and saturation/lightness in percent
    """
    r8, g8, b8 = parse_hex(hex_color)
    r, g, b = r8 / 255.0, g8 / 255.0, b8 / 255.0

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if delta != 0:
        s = delta / (2 - max_c - min_c) if l > 0.5 else delta / (max_c + min_c)

        if max_c == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6

    return HSL(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(l * 100)
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to hex format.

    Args:
        h: Hue in degrees (wrapped modulo 360)
        s: Saturation [0, 100]
        l: Lightness [0, 100]

    Returns:
        Hex color string in format #RRGGBB (uppercase)

    Raises:
        ValueError: If saturation or lightness is outside [0, 100]
    """
    if not 0 <= s <= 100:
        raise ValueError(f"Saturation out of range [0, 100]: {s}")
    if not 0 <= l <= 100:
        raise ValueError(f"Lightness out of range [0, 100]: {l}")

    h = (h % 360) / 360.0
    s = s / 100.0
    l = l / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h * 6) % 2) - 1))
    m = l - c / 2

    sector = int(h * 6)
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    r_int = round_half_up((r + m) * 255)
    g_int = round_half_up((g + m) * 255)
    b_int = round_half_up((b + m) * 255)

    return f"#{r_int:02X}{g_int:02X}{b_int:02X}"


def get_color_brightness(hex_color: str) -> int:
    """
    Get perceived brightness (luma) of a color.

    Args:
        hex_color: Color as RRGGBB or #RRGGBB

    Returns:
        Brightness in [0, 255]
    """
    r, g, b = parse_hex(hex_color)
    wr, wg, wb = LUMA_WEIGHTS
    return round_half_up(wr * r + wg * g + wb * b)


def rotate_hue(h: int, degrees: int) -> int:
    """Rotate an integer hue by the given degrees, wrapping to [0, 360)."""
    return (h + degrees) % 360


def hue_distance(h1: float, h2: float) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Args:
        h1: First hue in degrees
        h2: Second hue in degrees

    Returns:
        Circular distance in degrees [0, 180]
    """
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def get_complementary_color(hex_color: str) -> str:
    """
    Get the complementary color (hue rotated by 180 degrees).

    Args:
        hex_color: Base color as RRGGBB or #RRGGBB

    Returns:
        Complementary color as #RRGGBB
    """
    hsl = hex_to_hsl(hex_color)
    return hsl_to_hex(rotate_hue(hsl.h, 180), hsl.s, hsl.l)
