# Common constants and exceptions shared across packages
from .constants import *
from .errors import (
    MiniHTMLError,
    ParseError,
    MismatchedTagError,
    FetchError,
    UnsupportedURLError,
    HTTPStatusError,
)

__all__ = [
    'ROOT_TAG', 'INDENT_WIDTH',
    'DEFAULT_ENCODING', 'DEFAULT_TIMEOUT', 'MAX_NETWORK_WORKERS', 'MAX_REDIRECTS',
    'MiniHTMLError',
    'ParseError',
    'MismatchedTagError',
    'FetchError',
    'UnsupportedURLError',
    'HTTPStatusError',
]
