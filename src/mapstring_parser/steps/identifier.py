from typing import Callable, Tuple

LetterPredicate = Callable[[str], bool]


def _is_unicode_letter(ch: str) -> bool:
    return ch.isalpha()


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


_POLICIES = {
    "unicode": _is_unicode_letter,
    "ascii": _is_ascii_letter,
}


def letter_predicate(policy: str) -> LetterPredicate:
    """Return the single-character letter test for a ``ParserConfig.letters`` policy."""
    try:
        return _POLICIES[policy]
    except KeyError:
        raise ValueError(f"letters must be one of {tuple(_POLICIES)}, got {policy!r}") from None


def read_identifier(raw: str, pos: int, is_letter: LetterPredicate = _is_unicode_letter) -> Tuple[str, int]:
    """
    Consume the maximal run of letters starting at ``pos``.

    Returns (identifier, new_pos). The run may be empty: a non-letter (or end
    of input) at ``pos`` yields ``("", pos)`` and leaves rejecting it to the
    delimiter that has to follow.
    """
    end = pos
    n = len(raw)
    while end < n and is_letter(raw[end]):
        end += 1
    return raw[pos:end], end
