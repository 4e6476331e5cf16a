from __future__ import annotations
from typing import Dict, Iterable, Tuple


def dump_pairs(pairs: Iterable[Tuple[str, str]], pair_delimiter: str = ";", key_value_delimiter: str = "=") -> str:
    """Serialize pairs back into the document format, every pair terminated."""
    return "".join(f"{k}{key_value_delimiter}{v}{pair_delimiter}" for k, v in pairs)


def dump_mapping(mapping: Dict[str, str], reverse: bool = False) -> str:
    items = list(mapping.items())
    if reverse:
        items.reverse()
    return dump_pairs(items)
