from .parser import MapStringParser, parse
from .conf import ParserConfig
from .errors import ParseError, UnexpectedEndOfInput, UnexpectedCharacter, DuplicateKey

__all__ = [
    "MapStringParser",
    "parse",
    "ParserConfig",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedCharacter",
    "DuplicateKey",
]
