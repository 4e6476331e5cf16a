from typing import Any, Dict, Optional, Tuple


class ParseError(Exception):
    """Raised when the input is not a well-formed ``key=value;`` document."""
    def __init__(self, message: str, position: Optional[int] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.position = position
        self.context = dict(context or {})
        if position is not None:
            self.context.setdefault("position", position)
        self._init_args: Tuple[Any, ...] = (message, position, context)

    def __reduce__(self):
        # Rebuild through the subclass signature so errors survive pickling
        # (e.g. when raised inside a process pool worker).
        return type(self), self._init_args


class UnexpectedEndOfInput(ParseError):
    """The input ran out where a delimiter (or letter, in strict mode) was required."""
    def __init__(self, position: int, expected: str):
        super().__init__(
            f"Unexpected end of input at offset {position}: expected {expected!r}",
            position=position,
            context={"expected": expected},
        )
        self.expected = expected
        self._init_args = (position, expected)


class UnexpectedCharacter(ParseError):
    def __init__(self, position: int, expected: str, found: str):
        super().__init__(
            f"Unexpected character {found!r} at offset {position}: expected {expected!r}",
            position=position,
            context={"expected": expected, "found": found},
        )
        self.expected = expected
        self.found = found
        self._init_args = (position, expected, found)


class DuplicateKey(ParseError):
    def __init__(self, position: int, key: str):
        super().__init__(
            f"Duplicate key {key!r} at offset {position}",
            position=position,
            context={"key": key},
        )
        self.key = key
        self._init_args = (position, key)
