import logging
from typing import Any, Dict, Optional

from mapstring_parser.conf import ParserConfig
from mapstring_parser.errors import DuplicateKey, ParseError, UnexpectedCharacter, UnexpectedEndOfInput
from mapstring_parser.steps.delimiter import consume_delimiter
from mapstring_parser.steps.identifier import letter_predicate, read_identifier

logger = logging.getLogger(__name__)


class MapStringParser:
    """
    Recursive-descent parser for flat ``key=value;`` documents.

    Grammar::

        document   := pair ";" document | ε
        pair       := identifier "=" identifier
        identifier := letter*

    The instance only holds its config; all cursor/result state lives in a
    dict created per ``parse`` call, so one parser can be shared freely.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self._is_letter = letter_predicate(self.config.letters)

    # ---------- Public API ----------

    def parse(self, raw: str) -> Dict[str, str]:
        """
        Parse ``raw`` into a key -> value dict (insertion ordered).

        Raises a ParseError subclass on the first malformed position; no
        partial result is ever returned.
        """
        if not isinstance(raw, str):
            raise TypeError(f"parse() expects str, got {type(raw).__name__}")

        state: Dict[str, Any] = {
            "raw": raw,
            "pos": 0,
            "result": {},
        }

        logger.debug("Parsing %d characters", len(raw))
        try:
            self._parse_pairs(state)
        except ParseError as exc:
            logger.debug("Parse failed with %s at offset %s", type(exc).__name__, exc.position)
            raise

        logger.debug("Parsed %d pairs", len(state["result"]))
        return state["result"]

    # ---------- Grammar rules ----------

    def _parse_pairs(self, state: Dict[str, Any]) -> None:
        while state["pos"] < len(state["raw"]):
            self._parse_pair(state)
            state["pos"] = consume_delimiter(state["raw"], state["pos"], self.config.pair_delimiter)

    def _parse_pair(self, state: Dict[str, Any]) -> None:
        key_pos = state["pos"]
        key = self._read_identifier(state)
        state["pos"] = consume_delimiter(state["raw"], state["pos"], self.config.key_value_delimiter)
        value = self._read_identifier(state)

        result = state["result"]
        if key in result:
            raise DuplicateKey(key_pos, key)
        result[key] = value

    def _read_identifier(self, state: Dict[str, Any]) -> str:
        raw, start = state["raw"], state["pos"]
        ident, state["pos"] = read_identifier(raw, start, self._is_letter)

        if not ident and not self.config.allow_empty_identifiers:
            if start >= len(raw):
                raise UnexpectedEndOfInput(start, "letter")
            raise UnexpectedCharacter(start, "letter", raw[start])
        return ident


def parse(raw: str, config: Optional[ParserConfig] = None) -> Dict[str, str]:
    """Shortcut for ``MapStringParser(config).parse(raw)``."""
    return MapStringParser(config).parse(raw)
