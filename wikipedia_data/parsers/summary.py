"""
Page summary parser.

This module provides the SummaryParser class for the Wikimedia REST
``page/summary`` endpoint.
"""

from typing import Any

from wikipedia_data.errors import MalformedResponseError
from wikipedia_data.models import SummaryRecord
from wikipedia_data.parsers.base import ResponseParser, optional_text, require

DISAMBIGUATION_TYPE = "disambiguation"

# "missingtitle" comes from the action API; the REST gateway answers a 404
# whose type is an error URI ending in "not_found".
_MISSING_TITLE_MARKERS = ("missingtitle", "not_found")


def is_missing_title(summary_type: str) -> bool:
    """True when a summary type means the page does not exist."""
    return any(marker in summary_type for marker in _MISSING_TITLE_MARKERS)


class SummaryParser(ResponseParser[SummaryRecord]):
    """Parses page summaries, including the service's not-found payloads."""

    source = "Wikimedia API"

    def parse(self, payload: Any) -> SummaryRecord:
        """Normalizes a summary payload."""
        summary_type = require(self.source, payload, "type")
        if not isinstance(summary_type, str):
            raise MalformedResponseError(self.source, "type")

        # Error payloads carry no article fields, only the type.
        if is_missing_title(summary_type):
            return SummaryRecord(
                type=summary_type,
                title=optional_text(payload, "title"),
                description="",
                summary="",
                url="",
                thumbnail_url="",
            )

        return SummaryRecord(
            type=summary_type,
            title=self._text(payload, "title"),
            description=optional_text(payload, "description"),
            summary=self._text(payload, "extract"),
            url=self._text(payload, "content_urls", "desktop", "page"),
            thumbnail_url=optional_text(payload, "thumbnail", "source"),
        )

    def _text(self, payload: Any, *path: str) -> str:
        value = require(self.source, payload, *path)
        if not isinstance(value, str):
            raise MalformedResponseError(self.source, ".".join(path))
        return value
