"""
Palette Harmony v1 API Routes
Exposes conversion, sorting, harmony search and palette suggestions over HTTP.
"""
import time
from typing import Any, Dict, List, NoReturn, Optional

from fastapi import APIRouter, HTTPException, Path, Query

from palette_harmony.config import config
from palette_harmony.schemas import (
    ColorInfoResponse, HSLValue, HexResponse, CollectionRequest, SortResponse,
    HarmonyRequest, HarmonyMatchEntry, HarmonyResponse, SuggestionEntry,
    SuggestionsResponse, ColorEntry
)
from palette_harmony.services.colors.conversion import (
    hex_to_hsl, hsl_to_hex, get_color_brightness, get_complementary_color
)
from palette_harmony.services.colors.sorting import SORTERS
from palette_harmony.services.colors.harmony import HarmonyType, find_harmony
from palette_harmony.services.colors.harmony.suggestions import generate_smart_palette_suggestions
from palette_harmony.utils.ids import generate_request_id
from palette_harmony.utils.logging import get_logger
from palette_harmony.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Palette Harmony"])
logger = get_logger()

SORT_KEY_PATTERN = "^(" + "|".join(SORTERS) + ")$"
RELATION_PATTERN = "^(" + "|".join(relation.value for relation in HarmonyType) + ")$"


def _record(operation: str, start_time: float, result_size: Optional[int] = None) -> float:
    """Record request metrics and return elapsed milliseconds."""
    duration_ms = round((time.time() - start_time) * 1000, 2)
    if config.METRICS_ENABLED:
        metrics = get_metrics()
        metrics.increment_request_count(operation)
        metrics.record_timing(operation, duration_ms)
        if result_size is not None:
            metrics.record_result_size(operation, result_size)
    return duration_ms


def _fail(operation: str, request_id: str, start_time: float, error: Exception) -> NoReturn:
    """Log a failed request and raise the matching HTTP error."""
    error_time = round((time.time() - start_time) * 1000, 2)
    error_type = "invalid_input" if isinstance(error, ValueError) else "internal"

    if config.METRICS_ENABLED:
        get_metrics().increment_failure_count(error_type)

    if isinstance(error, ValueError):
        logger.warning(f"{operation} request {request_id} rejected", extra={
            "request_id": request_id,
            "error": str(error),
            "error_time_ms": error_time
        })
        raise HTTPException(status_code=400, detail=str(error))

    logger.error(f"{operation} request {request_id} failed", extra={
        "request_id": request_id,
        "error": str(error),
        "error_time_ms": error_time
    })
    raise HTTPException(
        status_code=500,
        detail=f"Internal error during {operation}"
    )


def _collection_to_records(colors: List[ColorEntry]) -> List[Dict[str, Any]]:
    """Validate collection size and convert entries to plain records."""
    if not config.validate_collection_size(len(colors)):
        raise HTTPException(
            status_code=400,
            detail=f"Collection too large: {len(colors)} colors (max {config.MAX_COLLECTION_SIZE})"
        )
    return [color.model_dump() for color in colors]


@router.get("/colors/hsl/{h}/{s}/{l}", response_model=HexResponse, summary="HSL to hex")
async def convert_hsl(
    h: int = Path(..., description="Hue in degrees (wrapped modulo 360)"),
    s: int = Path(..., ge=0, le=100, description="Saturation percent"),
    l: int = Path(..., ge=0, le=100, description="Lightness percent")
) -> HexResponse:
    """Render an HSL triple as an uppercase #RRGGBB string."""
    request_id = generate_request_id()
    start_time = time.time()

    try:
        response = HexResponse(hex=hsl_to_hex(h, s, l))
        duration_ms = _record("convert_hsl", start_time)

        logger.debug(f"HSL request {request_id} completed", extra={
            "request_id": request_id,
            "hsl": [h, s, l],
            "hex": response.hex,
            "total_time_ms": duration_ms
        })

        return response

    except Exception as e:
        _fail("convert_hsl", request_id, start_time, e)


@router.get("/colors/{hex_value}", response_model=ColorInfoResponse, summary="Describe a color")
async def describe_color(
    hex_value: str = Path(..., description="Color as RRGGBB (no leading '#')")
) -> ColorInfoResponse:
    """Return HSL, brightness and the complementary color for a hex value."""
    request_id = generate_request_id()
    start_time = time.time()

    try:
        hsl = hex_to_hsl(hex_value)
        response = ColorInfoResponse(
            hex=hex_value,
            hsl=HSLValue(h=hsl.h, s=hsl.s, l=hsl.l),
            brightness=get_color_brightness(hex_value),
            complementary_hex=get_complementary_color(hex_value)
        )
        _record("describe_color", start_time)
        return response

    except Exception as e:
        _fail("describe_color", request_id, start_time, e)


@router.post("/palettes/sort", response_model=SortResponse, summary="Sort a collection")
async def sort_palette(
    request: CollectionRequest,
    by: str = Query("hue", pattern=SORT_KEY_PATTERN, description="Sort key")
) -> SortResponse:
    """Return the collection ordered by the requested HSL component."""
    request_id = generate_request_id()
    start_time = time.time()
    records = _collection_to_records(request.colors)

    try:
        sorted_colors = SORTERS[by](records)
        _record("sort_palette", start_time, len(sorted_colors))
        return SortResponse(by=by, colors=sorted_colors)

    except Exception as e:
        _fail("sort_palette", request_id, start_time, e)


@router.post("/palettes/harmony/{relation}", response_model=HarmonyResponse, summary="Harmony search")
async def harmony_search(
    request: HarmonyRequest,
    relation: str = Path(
        ...,
        pattern=RELATION_PATTERN,
        description="Harmony relation"
    )
) -> HarmonyResponse:
    """Find collection colors standing in the given harmony relation to base_hex."""
    request_id = generate_request_id()
    start_time = time.time()
    records = _collection_to_records(request.colors)

    if request.count is not None and not config.validate_count(request.count):
        raise HTTPException(
            status_code=400,
            detail=f"count must be between 0 and {config.MAX_RESULT_COUNT}"
        )

    logger.info(f"Harmony request {request_id} started", extra={
        "request_id": request_id,
        "relation": relation,
        "base_hex": request.base_hex,
        "collection_size": len(records)
    })

    try:
        matches = find_harmony(HarmonyType(relation), records, request.base_hex, request.count)
        duration_ms = _record(f"harmony_{relation}", start_time, len(matches))

        logger.info(f"Harmony request {request_id} completed", extra={
            "request_id": request_id,
            "matches": len(matches),
            "total_time_ms": duration_ms
        })

        return HarmonyResponse(
            relation=relation,
            base_hex=request.base_hex,
            matches=[HarmonyMatchEntry(color=dict(m.color), score=m.score) for m in matches],
            meta={"request_id": request_id, "timing_ms": duration_ms}
        )

    except Exception as e:
        _fail(f"harmony_{relation}", request_id, start_time, e)


@router.post("/palettes/suggestions", response_model=SuggestionsResponse, summary="Smart suggestions")
async def palette_suggestions(request: CollectionRequest) -> SuggestionsResponse:
    """Generate analogous, complementary and triadic palette suggestions."""
    request_id = generate_request_id()
    start_time = time.time()
    records = _collection_to_records(request.colors)

    logger.info(f"Suggestion request {request_id} started", extra={
        "request_id": request_id,
        "collection_size": len(records)
    })

    try:
        suggestions = generate_smart_palette_suggestions(records)
        duration_ms = _record("suggestions", start_time, len(suggestions))

        logger.info(f"Suggestion request {request_id} completed", extra={
            "request_id": request_id,
            "total_suggestions": len(suggestions),
            "total_time_ms": duration_ms
        })

        return SuggestionsResponse(
            suggestions=[
                SuggestionEntry(
                    name=s.name,
                    type=s.type.value,
                    base_color=dict(s.base_color),
                    colors=[dict(c) for c in s.colors]
                )
                for s in suggestions
            ],
            meta={"request_id": request_id, "timing_ms": duration_ms}
        )

    except Exception as e:
        _fail("suggestions", request_id, start_time, e)


@router.get("/metrics", summary="Metrics summary")
async def metrics_summary() -> Dict[str, Any]:
    """Return in-process request counters and timing statistics."""
    return get_metrics().get_summary()
