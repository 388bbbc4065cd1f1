from liquor_cabinet.utils.date_helpers import (
    start_of_current_month,
)
from liquor_cabinet.utils.validators import (
    parse_image_data_uri,
    is_allowed_image_mime,
    sanitize_search_query,
)
from liquor_cabinet.utils.exceptions import (
    UnauthorizedException,
    BottleNotFoundException,
    CocktailNotFoundException,
    InvalidImageException,
    BottleNotRecognizedException,
    EmptySearchQueryException,
    AIResponseParseError,
    AIServiceUnavailableError,
)

__all__ = [
    "start_of_current_month",
    "parse_image_data_uri",
    "is_allowed_image_mime",
    "sanitize_search_query",
    "UnauthorizedException",
    "BottleNotFoundException",
    "CocktailNotFoundException",
    "InvalidImageException",
    "BottleNotRecognizedException",
    "EmptySearchQueryException",
    "AIResponseParseError",
    "AIServiceUnavailableError",
]
