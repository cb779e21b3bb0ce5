"""
Wikipedia Data
Looks up a Wikipedia article for a search term (or a note's title), renders
one of the user's templates with the article's data, and prints it or
appends it to the note.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from wikipedia_data.config import Settings, load_settings
from wikipedia_data.models import (
    Disambiguation,
    MalformedResponse,
    NotFound,
    Outcome,
    Rendered,
    Resolved,
    SourceUnavailable,
)
from wikipedia_data.parsers.extract import ExtractParser
from wikipedia_data.parsers.search import SearchParser
from wikipedia_data.parsers.summary import SummaryParser
from wikipedia_data.services.pipeline import resolve_article
from wikipedia_data.services.renderer import TemplateRenderer
from wikipedia_data.services.wikipedia import WikipediaService


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

SOURCE_PURPOSES = {
    SearchParser.source: "article title",
    SummaryParser.source: "article data",
    ExtractParser.source: "article text",
}


def apply_template(
    search_term: str,
    template_number: int,
    settings: Settings,
    service: Optional[WikipediaService] = None,
) -> Outcome:
    """Resolves ``search_term`` and renders template slot ``template_number``."""
    # Fail on a bad slot before any request goes out.
    settings.template(template_number)
    if service is None:
        service = WikipediaService(settings.get_language(), timeout=settings.timeout)

    resolution = resolve_article(search_term, service)
    if not isinstance(resolution, Resolved):
        return resolution

    renderer = TemplateRenderer(settings)
    text = renderer.render(resolution.article, search_term, template_number)
    return Rendered(search_term, text)


def note_search_term(note_path: str) -> str:
    """A note's title is its file name without the extension."""
    return os.path.splitext(os.path.basename(note_path))[0]


def apply_template_for_note(
    note_path: str,
    template_number: int,
    settings: Settings,
    service: Optional[WikipediaService] = None,
) -> Outcome:
    """Renders a template for the note's title and appends it to the note."""
    search_term = note_search_term(note_path)
    if not search_term:
        raise ValueError(f"Cannot derive a search term from {note_path!r}")

    outcome = apply_template(search_term, template_number, settings, service)
    if isinstance(outcome, Rendered):
        with open(note_path, "a", encoding="utf-8") as f:
            f.write(outcome.text)
        logger.info("Appended template #%d to %s", template_number, note_path)
    return outcome


def describe_outcome(outcome: Outcome) -> str:
    """User-facing message for an outcome."""
    if isinstance(outcome, Rendered):
        return outcome.text
    if isinstance(outcome, NotFound):
        return f"{outcome.search_term} not found on Wikipedia."
    if isinstance(outcome, Disambiguation):
        return (
            f"{outcome.search_term} returned a disambiguation page.\n"
            f"{outcome.search_term} Disambiguation Page: {outcome.url}"
        )
    if isinstance(outcome, SourceUnavailable):
        purpose = SOURCE_PURPOSES.get(outcome.source, "article data")
        return (
            f"Failed to reach {outcome.source} for {purpose}. "
            "Check your search term, internet connection, or language prefix."
        )
    if isinstance(outcome, MalformedResponse):
        return (
            f"{outcome.source} returned an unexpected response "
            f"(missing '{outcome.field}') for {outcome.search_term}."
        )
    raise TypeError(f"Unknown outcome: {outcome!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikipedia-data",
        description="Insert Wikipedia article data into a text template.",
    )
    parser.add_argument("search_term", nargs="?", help="Article to look up.")
    parser.add_argument(
        "-t", "--template", type=int, default=1, help="Template number to apply (default: 1)."
    )
    parser.add_argument("-c", "--config", default="", help="Path to the JSON settings file.")
    parser.add_argument(
        "-n",
        "--note",
        help="Note file whose title is the search term; the result is appended to it.",
    )
    parser.add_argument(
        "--list-templates", action="store_true", help="Show the configured templates and exit."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.config)

    if args.list_templates:
        for template in settings.templates:
            print(f"#{template['key']} {template['name']}: {template['description']}")
        return 0

    if not args.note and not args.search_term:
        parser.error("a search term or --note is required")

    try:
        if args.note:
            outcome = apply_template_for_note(args.note, args.template, settings)
        else:
            outcome = apply_template(args.search_term, args.template, settings)
    except ValueError as e:
        parser.error(str(e))

    if isinstance(outcome, Rendered):
        if not args.note:
            print(outcome.text)
        return 0

    print(describe_outcome(outcome), file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
