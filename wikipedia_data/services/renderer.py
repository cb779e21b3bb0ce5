"""
Template rendering service.

This module provides the TemplateRenderer class, which formats the fields of
a resolved article and substitutes them into one of the user's templates.
"""

import logging
from typing import List, Tuple

from wikipedia_data.config import Settings
from wikipedia_data.models import ResolvedArticle
from wikipedia_data.services.formatter import format_intro_text, format_summary

logger = logging.getLogger(__name__)

THUMBNAIL_TEMPLATE_TOKEN = "{{thumbnailTemplate}}"
THUMBNAIL_URL_TOKEN = "{{thumbnailUrl}}"


def substitute(template: str, values: List[Tuple[str, str]]) -> str:
    """
    Replaces the first occurrence of each token, in order.

    Repeated tokens after the first and tokens missing from ``values`` are
    left in the output as literal text.
    """
    for token, value in values:
        template = template.replace(token, value, 1)
    return template


class TemplateRenderer:
    """Renders resolved articles with the user's templates."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _render_thumbnail(self, thumbnail_url: str) -> str:
        """Renders the thumbnail sub-template, or nothing without a thumbnail."""
        if not thumbnail_url:
            return ""
        return substitute(
            self.settings.thumbnail_template, [(THUMBNAIL_URL_TOKEN, thumbnail_url)]
        )

    def field_values(self, article: ResolvedArticle, search_term: str) -> List[Tuple[str, str]]:
        """Token/value pairs in substitution order."""
        summary = format_summary(
            article.summary, search_term, self.settings.bold_search_term
        )
        intro_text = format_intro_text(
            article.intro_text,
            search_term,
            bold_search_term=self.settings.bold_search_term,
            use_paragraph_template=self.settings.use_paragraph_template,
            paragraph_template=self.settings.paragraph_template,
        )
        return [
            ("{{title}}", article.title),
            ("{{url}}", article.url),
            (THUMBNAIL_TEMPLATE_TOKEN, self._render_thumbnail(article.thumbnail_url)),
            (THUMBNAIL_URL_TOKEN, article.thumbnail_url),
            ("{{description}}", article.description),
            ("{{summary}}", summary),
            ("{{introText}}", intro_text),
            ("{{id}}", str(article.id)),
            ("{{key}}", article.key),
        ]

    def render(self, article: ResolvedArticle, search_term: str, template_number: int) -> str:
        """Renders template slot ``template_number`` for ``article``."""
        template = self.settings.template(template_number)
        logger.info("Rendering template #%d for %r", template_number, article.title)
        return substitute(template, self.field_values(article, search_term))
