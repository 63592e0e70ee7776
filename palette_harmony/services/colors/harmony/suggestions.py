"""
Palette Harmony - Smart Palette Suggestions

Composes analogous, complementary and triadic searches over the first few
colors of a collection into a list of ready-made palette suggestions.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from loguru import logger

from .. import ColorRecord
from . import HarmonyType, DEFAULT_COUNTS, HARMONY_FINDERS


@dataclass
class PaletteSuggestion:
    """A suggested palette built around one base color."""
    name: str
    type: HarmonyType
    base_color: ColorRecord
    colors: List[ColorRecord] = field(default_factory=list)


MIN_COLLECTION_SIZE = 3
MIN_SUGGESTION_SIZE = 3
MAX_BASE_COLORS = 5

# Bases at index < limit get a suggestion of that type
ANALOGOUS_BASE_LIMIT = 3
COMPLEMENTARY_BASE_LIMIT = 2
TRIADIC_BASE_LIMIT = 2

SUGGESTION_LABELS = {
    HarmonyType.ANALOGOUS: "Análoga desde",
    HarmonyType.COMPLEMENTARY: "Complementaria desde",
    HarmonyType.TRIADIC: "Triádica desde",
}


def _build_suggestion(
    relation: HarmonyType,
    base_color: ColorRecord,
    colors: Sequence[ColorRecord]
) -> PaletteSuggestion:
    matches = HARMONY_FINDERS[relation](colors, base_color["hex"], DEFAULT_COUNTS[relation])
    return PaletteSuggestion(
        name=f"{SUGGESTION_LABELS[relation]} {base_color['name']}",
        type=relation,
        base_color=base_color,
        colors=[match.color for match in matches]
    )


def generate_smart_palette_suggestions(colors: Sequence[ColorRecord]) -> List[PaletteSuggestion]:
    """
    Generate palette suggestions from a color collection.

    The first five colors, in collection order, serve as bases. The first
    three bases get an analogous suggestion and the first two also get a
    complementary and a triadic one. Suggestions with fewer than three
    colors are dropped.

    Args:
        colors: User's color collection

    Returns:
        Suggestions in emission order; empty for collections under three colors
    """
    if len(colors) < MIN_COLLECTION_SIZE:
        return []

    suggestions = []
    base_colors = colors[:MAX_BASE_COLORS]

    for index, base_color in enumerate(base_colors):
        if index < ANALOGOUS_BASE_LIMIT:
            suggestions.append(_build_suggestion(HarmonyType.ANALOGOUS, base_color, colors))

        if index < COMPLEMENTARY_BASE_LIMIT:
            suggestions.append(_build_suggestion(HarmonyType.COMPLEMENTARY, base_color, colors))

        if index < TRIADIC_BASE_LIMIT:
            suggestions.append(_build_suggestion(HarmonyType.TRIADIC, base_color, colors))

    kept = [s for s in suggestions if len(s.colors) >= MIN_SUGGESTION_SIZE]

    logger.bind(
        collection_size=len(colors),
        candidates=len(suggestions),
        kept=len(kept)
    ).debug(f"Kept {len(kept)} of {len(suggestions)} palette suggestions")

    return kept
