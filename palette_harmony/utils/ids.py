"""
Palette Harmony Request ID Utilities
Generate unique request IDs for tracing.
"""
import uuid
from datetime import datetime

REQUEST_ID_PREFIX = "pal"


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracking.

    Returns:
        Request ID of the form pal-<YYYYmmddHHMMSS>-<8 hex chars>
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = uuid.uuid4().hex[:8]
    return f"{REQUEST_ID_PREFIX}-{timestamp}-{short_uuid}"


def extract_timestamp_from_request_id(request_id: str) -> str:
    """
    Extract timestamp from request ID.

    Args:
        request_id: Request ID string

    Returns:
        Timestamp string or empty if not found
    """
    parts = request_id.split("-")
    if len(parts) >= 2 and parts[0] == REQUEST_ID_PREFIX:
        return parts[1]
    return ""
