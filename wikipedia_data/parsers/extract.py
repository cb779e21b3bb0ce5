"""
Plain-text extract parser.

This module provides the ExtractParser class for the MediaWiki action API
``prop=extracts`` query, whose pages are keyed by stringified page id.
"""

from typing import Any

from wikipedia_data.errors import MalformedResponseError
from wikipedia_data.models import ExtractRecord
from wikipedia_data.parsers.base import ResponseParser, require


class ExtractParser(ResponseParser[ExtractRecord]):
    """Parses the extract of one page, identified by its id."""

    source = "MediaWiki Action API"

    def __init__(self, page_id: int):
        self.page_id = page_id

    def parse(self, payload: Any) -> ExtractRecord:
        """Normalizes an extract payload."""
        text = require(self.source, payload, "query", "pages", str(self.page_id), "extract")
        if not isinstance(text, str):
            raise MalformedResponseError(self.source, "extract")
        return ExtractRecord(full_text=text)
