from .delimiter import consume_delimiter
from .identifier import letter_predicate, read_identifier

__all__ = ["consume_delimiter", "letter_predicate", "read_identifier"]
