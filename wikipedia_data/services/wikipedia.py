"""
Wikipedia service client.

This module provides the WikipediaService class, which knows the per-language
endpoints of the three upstream services and pairs each request with the
parser for its payload.
"""

import logging
from urllib.parse import quote

from wikipedia_data.models import ExtractRecord, SearchRecord, SummaryRecord
from wikipedia_data.parsers.extract import ExtractParser
from wikipedia_data.parsers.search import SearchParser
from wikipedia_data.parsers.summary import SummaryParser
from wikipedia_data.services.http import DEFAULT_TIMEOUT, fetch_json

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
SEARCH_LIMIT = 5


class WikipediaService:
    """Fetches and normalizes data from one language edition of Wikipedia."""

    def __init__(self, language: str = DEFAULT_LANGUAGE, timeout: float = DEFAULT_TIMEOUT):
        self.language = language or DEFAULT_LANGUAGE
        self.timeout = timeout
        self._search_parser = SearchParser()
        self._summary_parser = SummaryParser()

    @property
    def base_url(self) -> str:
        return f"https://{self.language}.wikipedia.org"

    def summary_url(self, title: str) -> str:
        """Wikimedia REST summary endpoint for a canonical title."""
        return f"{self.base_url}/api/rest_v1/page/summary/{quote(title, safe='')}"

    def search_url(self) -> str:
        return f"{self.base_url}/w/rest.php/v1/search/title"

    def extract_url(self) -> str:
        return f"{self.base_url}/w/api.php"

    def search(self, search_term: str) -> SearchRecord:
        """Resolves free text to the best matching page."""
        logger.info("Searching %s Wikipedia for %r", self.language, search_term)
        payload = fetch_json(
            self._search_parser.source,
            self.search_url(),
            params={"q": search_term, "limit": SEARCH_LIMIT},
            timeout=self.timeout,
        )
        return self._search_parser.parse(payload)

    def summary(self, title: str) -> SummaryRecord:
        """Fetches the summary for a canonical title."""
        # A 404 still carries a JSON body describing the missing title.
        payload = fetch_json(
            self._summary_parser.source,
            self.summary_url(title),
            timeout=self.timeout,
            accept_status=(404,),
        )
        return self._summary_parser.parse(payload)

    def extract(self, page_id: int) -> ExtractRecord:
        """Fetches the plain-text extract for a page id."""
        parser = ExtractParser(page_id)
        payload = fetch_json(
            parser.source,
            self.extract_url(),
            params={
                "format": "json",
                "action": "query",
                "prop": "extracts",
                "explaintext": 1,
                "redirects": "",
                "origin": "*",
                "pageids": page_id,
            },
            timeout=self.timeout,
        )
        return parser.parse(payload)
