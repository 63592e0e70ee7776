"""
Palette Harmony - Color Harmony Search

This module finds colors from a caller-owned collection that stand in a
classic color-wheel relation to a base color: analogous, complementary,
triadic, monochromatic and split-complementary. Each search is a
nearest-neighbor filter over a fixed angular hue window; matches are ranked
by ascending score and truncated to the requested count.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .. import ColorRecord
from ..conversion import hex_to_hsl, hue_distance, rotate_hue


class HarmonyType(str, Enum):
    """Supported harmony relations."""
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    SPLIT_COMPLEMENTARY = "split_complementary"


@dataclass(frozen=True)
class HarmonyMatch:
    """A collection color paired with its ranking score."""
    color: ColorRecord
    score: int  # Hue distance in degrees, or lightness distance for monochromatic


# Hue windows in degrees (inclusive)
ANALOGOUS_WINDOW = 60
COMPLEMENTARY_WINDOW = 45
COMPLEMENTARY_FALLBACK_WINDOW = 30
TRIADIC_WINDOW = 45
MONOCHROMATIC_WINDOW = 15
SPLIT_COMPLEMENTARY_WINDOW = 30

# Target offsets from the base hue
TRIADIC_OFFSETS = (120, 240, 0)
SPLIT_COMPLEMENTARY_OFFSETS = (150, 210, 0)

# Default result counts
DEFAULT_COUNTS = {
    HarmonyType.ANALOGOUS: 5,
    HarmonyType.COMPLEMENTARY: 4,
    HarmonyType.TRIADIC: 6,
    HarmonyType.MONOCHROMATIC: 5,
    HarmonyType.SPLIT_COMPLEMENTARY: 5,
}


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def _find_base_color(colors: Iterable[ColorRecord], base_hex: str) -> Optional[ColorRecord]:
    """Return the first collection color whose hex exactly equals base_hex."""
    return next((color for color in colors if color["hex"] == base_hex), None)


def _rank(matches: List[HarmonyMatch]) -> List[HarmonyMatch]:
    return sorted(matches, key=lambda match: match.score)


def _scan_targets(
    colors: Iterable[ColorRecord],
    target_hues: Sequence[int],
    window: int,
    exclude_hex: Optional[str] = None
) -> List[HarmonyMatch]:
    """
    Collect colors whose hue lies within window of the nearest target hue.

    Args:
        colors: Collection to scan
        target_hues: Hues in degrees to measure against
        window: Maximum circular distance (inclusive)
        exclude_hex: Hex value to skip entirely

    Returns:
        Ranked matches scored by distance to the nearest target
    """
    matches = []
    for color in colors:
        if exclude_hex is not None and color["hex"] == exclude_hex:
            continue

        hue = hex_to_hsl(color["hex"]).h
        diff = min(hue_distance(hue, target) for target in target_hues)
        if diff <= window:
            matches.append(HarmonyMatch(color=color, score=diff))

    return _rank(matches)


def _base_first_search(
    colors: Sequence[ColorRecord],
    base_hex: str,
    offsets: Sequence[int],
    window: int,
    count: int
) -> List[HarmonyMatch]:
    """Shared search for relations that lead with the base color itself."""
    _check_count(count)
    base_hsl = hex_to_hsl(base_hex)
    targets = [rotate_hue(base_hsl.h, offset) for offset in offsets]

    results = []
    base_color = _find_base_color(colors, base_hex)
    if base_color is not None:
        results.append(HarmonyMatch(color=base_color, score=0))

    results.extend(_scan_targets(colors, targets, window, exclude_hex=base_hex))
    return results[:count]


def find_analogous_colors_from_collection(
    colors: Sequence[ColorRecord],
    base_hex: str,
    count: int = DEFAULT_COUNTS[HarmonyType.ANALOGOUS]
) -> List[HarmonyMatch]:
    """
    Find collection colors within 60 degrees of the base hue.

    The base color itself is not excluded and ranks with distance 0.

    Args:
        colors: User's color collection
        base_hex: Base hex color
        count: Maximum number of matches

    Returns:
        Matches ordered by ascending hue distance
    """
    _check_count(count)
    base_hsl = hex_to_hsl(base_hex)
    return _scan_targets(colors, [base_hsl.h], ANALOGOUS_WINDOW)[:count]


def find_complementary_colors_from_collection(
    colors: Sequence[ColorRecord],
    base_hex: str,
    count: int = DEFAULT_COUNTS[HarmonyType.COMPLEMENTARY]
) -> List[HarmonyMatch]:
    """
    Find collection colors near the complement of the base hue.

    Ranking is two-tier: the base color (exact hex match) first, then colors
    within 45 degrees of base+180, then colors within 30 degrees of the base
    hue itself for variety. Each tier is ordered by hue distance.

    Args:
        colors: User's color collection
        base_hex: Base hex color
        count: Maximum number of matches

    Returns:
        Matches in tier order
    """
    _check_count(count)
    base_hsl = hex_to_hsl(base_hex)
    complementary_hue = rotate_hue(base_hsl.h, 180)

    results = []
    base_color = _find_base_color(colors, base_hex)
    if base_color is not None:
        results.append(HarmonyMatch(color=base_color, score=0))

    primary = _scan_targets(
        colors, [complementary_hue], COMPLEMENTARY_WINDOW, exclude_hex=base_hex
    )

    # Fallback skips anything already selected, including earlier fallback picks
    selected = {match.color["hex"] for match in results + primary}
    fallback = []
    for color in colors:
        if color["hex"] == base_hex or color["hex"] in selected:
            continue

        diff = hue_distance(hex_to_hsl(color["hex"]).h, base_hsl.h)
        if diff <= COMPLEMENTARY_FALLBACK_WINDOW:
            fallback.append(HarmonyMatch(color=color, score=diff))
            selected.add(color["hex"])

    results.extend(primary)
    results.extend(_rank(fallback))
    return results[:count]


def find_triadic_colors_from_collection(
    colors: Sequence[ColorRecord],
    base_hex: str,
    count: int = DEFAULT_COUNTS[HarmonyType.TRIADIC]
) -> List[HarmonyMatch]:
    """
    Find collection colors within 45 degrees of base+120, base+240 or the base hue.

    The base color leads the result when present in the collection.
    """
    return _base_first_search(colors, base_hex, TRIADIC_OFFSETS, TRIADIC_WINDOW, count)


def find_monochromatic_colors_from_collection(
    colors: Sequence[ColorRecord],
    base_hex: str,
    count: int = DEFAULT_COUNTS[HarmonyType.MONOCHROMATIC]
) -> List[HarmonyMatch]:
    """
    Find collection colors within 15 degrees of the base hue.

    Qualifying colors are ranked by lightness distance from the base, not by
    hue distance.

    Args:
        colors: User's color collection
        base_hex: Base hex color
        count: Maximum number of matches

    Returns:
        Matches scored by absolute lightness difference (percent)
    """
    _check_count(count)
    base_hsl = hex_to_hsl(base_hex)

    matches = []
    for color in colors:
        color_hsl = hex_to_hsl(color["hex"])
        if hue_distance(color_hsl.h, base_hsl.h) <= MONOCHROMATIC_WINDOW:
            matches.append(HarmonyMatch(color=color, score=abs(color_hsl.l - base_hsl.l)))

    return _rank(matches)[:count]


def find_split_complementary_from_collection(
    colors: Sequence[ColorRecord],
    base_hex: str,
    count: int = DEFAULT_COUNTS[HarmonyType.SPLIT_COMPLEMENTARY]
) -> List[HarmonyMatch]:
    """
    Find collection colors within 30 degrees of base+150, base+210 or the base hue.

    The base color leads the result when present in the collection.
    """
    return _base_first_search(
        colors, base_hex, SPLIT_COMPLEMENTARY_OFFSETS, SPLIT_COMPLEMENTARY_WINDOW, count
    )


HARMONY_FINDERS: Dict[HarmonyType, Callable[..., List[HarmonyMatch]]] = {
    HarmonyType.ANALOGOUS: find_analogous_colors_from_collection,
    HarmonyType.COMPLEMENTARY: find_complementary_colors_from_collection,
    HarmonyType.TRIADIC: find_triadic_colors_from_collection,
    HarmonyType.MONOCHROMATIC: find_monochromatic_colors_from_collection,
    HarmonyType.SPLIT_COMPLEMENTARY: find_split_complementary_from_collection,
}


def find_harmony(
    relation: HarmonyType,
    colors: Sequence[ColorRecord],
    base_hex: str,
    count: Optional[int] = None
) -> List[HarmonyMatch]:
    """
    Dispatch a harmony search by relation.

    Args:
        relation: Harmony relation to search for
        colors: User's color collection
        base_hex: Base hex color
        count: Maximum matches, or None for the relation's default

    Returns:
        Ranked matches for the relation
    """
    relation = HarmonyType(relation)
    if count is None:
        count = DEFAULT_COUNTS[relation]
    return HARMONY_FINDERS[relation](colors, base_hex, count)
