"""
Palette Harmony - Collection Sorting

Stable, non-mutating sorts of a color collection by HSL component.
"""

from typing import Iterable, List

from . import ColorRecord
from .conversion import hex_to_hsl


def sort_colors_by_hue(colors: Iterable[ColorRecord]) -> List[ColorRecord]:
    """Sort colors by ascending hue."""
    return sorted(colors, key=lambda color: hex_to_hsl(color["hex"]).h)


def sort_colors_by_saturation(colors: Iterable[ColorRecord]) -> List[ColorRecord]:
    """Sort colors by saturation, most saturated first."""
    return sorted(colors, key=lambda color: -hex_to_hsl(color["hex"]).s)


def sort_colors_by_lightness(colors: Iterable[ColorRecord]) -> List[ColorRecord]:
    """Sort colors by ascending lightness (darkest first)."""
    return sorted(colors, key=lambda color: hex_to_hsl(color["hex"]).l)


def sort_colors_chromatically(colors: Iterable[ColorRecord]) -> List[ColorRecord]:
    """Sort colors chromatically. Kept for compatibility; same order as by hue."""
    return sort_colors_by_hue(colors)


SORTERS = {
    "hue": sort_colors_by_hue,
    "saturation": sort_colors_by_saturation,
    "lightness": sort_colors_by_lightness,
    "chromatic": sort_colors_chromatically,
}
