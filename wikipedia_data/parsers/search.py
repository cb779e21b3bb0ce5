"""
Title search parser.

This module provides the SearchParser class for the MediaWiki REST
``search/title`` endpoint, which resolves free text to a canonical page.
"""

from typing import Any

from wikipedia_data.errors import MalformedResponseError
from wikipedia_data.models import SearchRecord
from wikipedia_data.parsers.base import ResponseParser, optional_text, require

# Description the search service attaches to disambiguation pages.
DISAMBIGUATION_DESCRIPTION = "Topics referred to by the same term"


class SearchParser(ResponseParser[SearchRecord]):
    """Parses title search results, keeping only the best match."""

    source = "MediaWiki API"

    def parse(self, payload: Any) -> SearchRecord:
        """Normalizes a search payload. No pages is a valid empty result."""
        pages = require(self.source, payload, "pages")
        if not isinstance(pages, list):
            raise MalformedResponseError(self.source, "pages")

        if not pages:
            return SearchRecord(
                result_count=0,
                id=0,
                key="",
                title="",
                description="",
                thumbnail_url="",
            )

        first = pages[0]
        page_id = require(self.source, first, "id")
        if isinstance(page_id, bool) or not isinstance(page_id, int):
            raise MalformedResponseError(self.source, "pages.id")

        return SearchRecord(
            result_count=len(pages),
            id=page_id,
            key=self._text(first, "key"),
            title=self._text(first, "title"),
            description=optional_text(first, "description"),
            thumbnail_url=optional_text(first, "thumbnail", "url"),
        )

    def _text(self, page: Any, name: str) -> str:
        value = require(self.source, page, name)
        if not isinstance(value, str):
            raise MalformedResponseError(self.source, f"pages.{name}")
        return value
