# Parsing components
from .tokenizer import TAG_PATTERN, TagToken, TextToken, Token, Tokenizer, tokenize
from .attributes import ATTRIBUTE_PATTERN, parse_attributes
from .options import ParserOptions, RecoveryPolicy
from .html_parser import HTMLParser, parse

__all__ = [
    'TAG_PATTERN',
    'TagToken',
    'TextToken',
    'Token',
    'Tokenizer',
    'tokenize',
    'ATTRIBUTE_PATTERN',
    'parse_attributes',
    'ParserOptions',
    'RecoveryPolicy',
    'HTMLParser',
    'parse',
]
