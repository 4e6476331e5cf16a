from mapstring_parser.errors import UnexpectedCharacter, UnexpectedEndOfInput


def consume_delimiter(raw: str, pos: int, expected: str) -> int:
    """
    Require ``expected`` at ``pos`` and return the offset just past it.

    Raises UnexpectedEndOfInput when ``pos`` is at the end of ``raw`` and
    UnexpectedCharacter when a different character sits there.
    """
    if pos >= len(raw):
        raise UnexpectedEndOfInput(pos, expected)
    found = raw[pos]
    if found != expected:
        raise UnexpectedCharacter(pos, expected, found)
    return pos + 1
