"""
Palette Harmony API Schemas
Pydantic models for conversion, sorting, harmony and suggestion request/response validation.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

HEX_PATTERN = r"^#?[0-9A-Fa-f]{6}$"


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("palette-harmony", description="Service name")


# ============================================================================
# COLOR SCHEMAS
# ============================================================================

class ColorEntry(BaseModel):
    """A color from the caller's collection. Extra fields pass through unchanged."""
    model_config = ConfigDict(extra="allow")

    hex: str = Field(
        ...,
        pattern=HEX_PATTERN,
        description="Hex color code as RRGGBB or #RRGGBB"
    )
    name: str = Field(..., max_length=120, description="Display label")


class HSLValue(BaseModel):
    """Integer HSL triple."""
    h: int = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation percent")
    l: int = Field(..., ge=0, le=100, description="Lightness percent")


class ColorInfoResponse(BaseModel):
    """Conversion results for a single hex color."""
    hex: str = Field(..., description="Input hex color")
    hsl: HSLValue
    brightness: int = Field(..., ge=0, le=255, description="Perceived brightness (BT.601 luma)")
    complementary_hex: str = Field(..., description="Hue-rotated complement as #RRGGBB")


class HexResponse(BaseModel):
    """Hex rendering of an HSL triple."""
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$", description="Uppercase #RRGGBB")


# ============================================================================
# COLLECTION SCHEMAS
# ============================================================================

class CollectionRequest(BaseModel):
    """A color collection submitted for sorting or suggestions."""
    colors: List[ColorEntry] = Field(default_factory=list, description="Caller-owned color collection")


class SortResponse(BaseModel):
    """Sorted collection."""
    by: str = Field(..., description="Sort key used")
    colors: List[Dict[str, Any]]


class HarmonyRequest(BaseModel):
    """Harmony search request."""
    colors: List[ColorEntry] = Field(default_factory=list, description="Caller-owned color collection")
    base_hex: str = Field(..., pattern=HEX_PATTERN, description="Base color")
    count: Optional[int] = Field(None, ge=0, description="Maximum matches; relation default when omitted")


class HarmonyMatchEntry(BaseModel):
    """A matched color with its ranking score."""
    color: Dict[str, Any]
    score: int = Field(..., description="Hue distance in degrees, or lightness distance for monochromatic")


class HarmonyResponse(BaseModel):
    """Harmony search response."""
    relation: str
    base_hex: str
    matches: List[HarmonyMatchEntry]
    meta: Dict[str, Any] = Field(default_factory=dict, description="Request id and timing")


class SuggestionEntry(BaseModel):
    """A suggested palette."""
    name: str
    type: str
    base_color: Dict[str, Any]
    colors: List[Dict[str, Any]]


class SuggestionsResponse(BaseModel):
    """Smart palette suggestions response."""
    suggestions: List[SuggestionEntry]
    meta: Dict[str, Any] = Field(default_factory=dict, description="Request id and timing")
