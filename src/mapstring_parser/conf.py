from dataclasses import dataclass

from mapstring_parser.steps.identifier import letter_predicate


@dataclass(frozen=True)
class ParserConfig:
    """Delimiters and identifier rules for the pair grammar."""

    # Terminates every pair, including the last one
    pair_delimiter: str = ";"
    # Separates key from value inside a pair
    key_value_delimiter: str = "="

    # "unicode": any code point str.isalpha() accepts, astral letters such as
    # U+1D400 included; "ascii": A-Z / a-z only
    letters: str = "unicode"

    # Zero-length keys/values ("=foo;") are legal unless this is switched off
    allow_empty_identifiers: bool = True

    def __post_init__(self) -> None:
        is_letter = letter_predicate(self.letters)

        for name in ("pair_delimiter", "key_value_delimiter"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
            if is_letter(value):
                raise ValueError(f"{name} {value!r} would be read as part of an identifier")

        if self.pair_delimiter == self.key_value_delimiter:
            raise ValueError("pair_delimiter and key_value_delimiter must differ")
