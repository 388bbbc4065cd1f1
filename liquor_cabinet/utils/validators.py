from typing import Optional, Tuple
import re

ALLOWED_IMAGE_MIME_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")

DATA_URI_PATTERN = re.compile(r"^data:(.+);base64,(.+)$", re.DOTALL)


def parse_image_data_uri(data_uri: Optional[str]) -> Optional[Tuple[str, str]]:
    """Retourne (mime, payload base64) ou None si l'URI est mal formée."""
    if not data_uri:
        return None

    match = DATA_URI_PATTERN.match(data_uri)
    if not match:
        return None

    return match.group(1), match.group(2)


def is_allowed_image_mime(mime_type: str) -> bool:
    return mime_type.lower() in ALLOWED_IMAGE_MIME_TYPES


def sanitize_search_query(query: Optional[str]) -> str:
    return (query or "").strip()
