# minihtml
# A minimal regex-driven HTML tag parser that builds a linked element tree

__version__ = "1.0.0"

# Re-export main API for convenience
from .common.errors import (
    MiniHTMLError,
    ParseError,
    MismatchedTagError,
    FetchError,
    UnsupportedURLError,
    HTTPStatusError,
)
from .dom import (
    Element,
    Text,
    find_by_tag,
    find_by_attribute,
    query_selector,
    build_id_index,
    traverse,
    save_tree,
    save_tree_async,
    pretty_print,
    to_dict,
    to_json,
)
from .parsing import HTMLParser, ParserOptions, RecoveryPolicy, parse
from .networking import fetch, fetch_async, parse_from_url, parse_from_url_async

__all__ = [
    'MiniHTMLError',
    'ParseError',
    'MismatchedTagError',
    'FetchError',
    'UnsupportedURLError',
    'HTTPStatusError',
    'Element',
    'Text',
    'find_by_tag',
    'find_by_attribute',
    'query_selector',
    'build_id_index',
    'traverse',
    'save_tree',
    'save_tree_async',
    'pretty_print',
    'to_dict',
    'to_json',
    'HTMLParser',
    'ParserOptions',
    'RecoveryPolicy',
    'parse',
    'fetch',
    'fetch_async',
    'parse_from_url',
    'parse_from_url_async',
]
