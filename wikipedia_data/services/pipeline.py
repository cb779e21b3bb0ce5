"""
Resolution pipeline.

Turns a search term into exactly one resolution outcome by chaining the
three Wikipedia lookups: the title search runs first, then the summary and
extract lookups run side by side on the canonical title and page id it
returned.
"""

import concurrent.futures
import logging

from wikipedia_data.errors import FetchError, MalformedResponseError
from wikipedia_data.models import (
    Disambiguation,
    ExtractRecord,
    MalformedResponse,
    NotFound,
    Resolution,
    Resolved,
    ResolvedArticle,
    SearchRecord,
    SourceUnavailable,
    SummaryRecord,
)
from wikipedia_data.parsers.search import DISAMBIGUATION_DESCRIPTION
from wikipedia_data.parsers.summary import DISAMBIGUATION_TYPE, is_missing_title
from wikipedia_data.services.wikipedia import WikipediaService

logger = logging.getLogger(__name__)


def resolve_article(search_term: str, service: WikipediaService) -> Resolution:
    """Looks up ``search_term`` and classifies the result."""
    if not search_term or not search_term.strip():
        raise ValueError("search_term must be a non-empty string")

    try:
        search = service.search(search_term)
        if search["result_count"] == 0:
            logger.info("No search results for %r", search_term)
            return NotFound(search_term)

        summary, extract = _fetch_details(search, service)
    except FetchError as e:
        return SourceUnavailable(search_term, e.source, e.reason)
    except MalformedResponseError as e:
        logger.error("Malformed response from %s: missing %s", e.source, e.field)
        return MalformedResponse(search_term, e.source, e.field)

    return classify(search_term, search, summary, extract)


def _fetch_details(search: SearchRecord, service: WikipediaService):
    """Fetches summary and extract concurrently; both only need the search."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
        summary_future = executor.submit(service.summary, search["title"])
        extract_future = executor.submit(service.extract, search["id"])
        return summary_future.result(), extract_future.result()


def classify(
    search_term: str,
    search: SearchRecord,
    summary: SummaryRecord,
    extract: ExtractRecord,
) -> Resolution:
    """Decides between not-found, disambiguation, and a resolved article."""
    if is_missing_title(summary["type"]) or search["result_count"] == 0:
        logger.info("%r has no Wikipedia article", search_term)
        return NotFound(search_term)

    if (
        summary["type"] == DISAMBIGUATION_TYPE
        or search["description"] == DISAMBIGUATION_DESCRIPTION
    ):
        logger.info("%r resolved to a disambiguation page", search_term)
        return Disambiguation(search_term, summary["url"])

    logger.info("Resolved %r to %r (id %d)", search_term, summary["title"], search["id"])
    return Resolved(
        ResolvedArticle(
            title=summary["title"],
            url=summary["url"],
            description=summary["description"],
            summary=summary["summary"],
            intro_text=extract["full_text"],
            id=search["id"],
            key=search["key"],
            thumbnail_url=summary["thumbnail_url"],
        )
    )
