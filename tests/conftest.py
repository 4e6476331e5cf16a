# tests/conftest.py
from __future__ import annotations

import pytest

from mapstring_parser.conf import ParserConfig
from mapstring_parser.parser import MapStringParser


@pytest.fixture(scope="session")
def config() -> ParserConfig:
    """Default parser config for all tests."""
    return ParserConfig()


@pytest.fixture(scope="session")
def parser(config: ParserConfig) -> MapStringParser:
    """Parser instance for all tests."""
    return MapStringParser(config=config)
