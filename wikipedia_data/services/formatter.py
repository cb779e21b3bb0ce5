"""
Text formatters applied to article fields before template rendering.
"""

import re

PARAGRAPH_TOKEN = "{{paragraphText}}"
SECTION_MARKER = "=="


def flatten_summary(summary: str) -> str:
    """Joins a summary onto one line so it fits single-line template slots."""
    return summary.replace("\n", " ").strip()


def emphasize_search_term(text: str, search_term: str) -> str:
    """Wraps the first case-insensitive occurrence of the term in ``**``."""
    if not search_term:
        return text
    match = re.search(re.escape(search_term), text, re.IGNORECASE)
    if not match:
        return text
    return f"{text[:match.start()]}**{match.group(0)}**{text[match.end():]}"


def intro_section(full_text: str) -> str:
    """Returns the text before the first section heading, trimmed."""
    return full_text.split(SECTION_MARKER, 1)[0].strip()


def apply_paragraph_template(intro: str, paragraph_template: str) -> str:
    """Runs every line of ``intro`` through the paragraph sub-template."""
    paragraphs = intro.split("\n")
    return "".join(
        paragraph_template.replace(PARAGRAPH_TOKEN, paragraph, 1)
        for paragraph in paragraphs
    ).strip()


def format_summary(summary: str, search_term: str, bold_search_term: bool) -> str:
    formatted = flatten_summary(summary)
    if bold_search_term:
        formatted = emphasize_search_term(formatted, search_term)
    return formatted


def format_intro_text(
    full_text: str,
    search_term: str,
    bold_search_term: bool,
    use_paragraph_template: bool,
    paragraph_template: str,
) -> str:
    """
    Builds the ``{{introText}}`` value from a plain-text extract.

    Only the intro section is kept. When the paragraph template is enabled each
    paragraph is rendered through it, otherwise the intro is used as is.

    If the result ends in ``>`` its last two characters are dropped. This only
    cleans up after quote-style paragraph templates such as ``"> {{paragraphText}}\\n>\\n"``,
    whose last paragraph leaves a dangling ``"\\n>"``; any other template ending
    in ``>`` will lose characters too.
    """
    intro = intro_section(full_text)
    if use_paragraph_template:
        formatted = apply_paragraph_template(intro, paragraph_template)
    else:
        formatted = intro

    if bold_search_term:
        formatted = emphasize_search_term(formatted, search_term)

    if formatted.endswith(">"):
        formatted = formatted[:-2]
    return formatted
