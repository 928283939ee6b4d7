from .helpers import enhance_or_400, http_400
from .params import get_page_request

__all__ = [
    "enhance_or_400",
    "get_page_request",
    "http_400",
]
