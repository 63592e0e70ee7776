"""
Palette Harmony Colors Module

Provides color model conversion, collection sorting and harmony search over
caller-owned color collections. A color is any mapping with at least a "hex"
and a "name" key; extra keys are passed through untouched.
"""

from typing import Any, Mapping

__version__ = "1.0.0"

ColorRecord = Mapping[str, Any]
