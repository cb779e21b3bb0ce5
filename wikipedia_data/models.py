"""
Data models for the Wikipedia Data application.

Upstream payloads are normalized into the TypedDict records below. The
resolution pipeline then reports exactly one of the outcome variants at the
bottom of this module.
"""

from dataclasses import dataclass
from typing import TypedDict, Union


class SearchRecord(TypedDict):
    """Type definition for a title-search result."""

    result_count: int
    id: int
    key: str
    title: str
    description: str
    thumbnail_url: str


class SummaryRecord(TypedDict):
    """Type definition for a page summary."""

    type: str
    title: str
    description: str
    summary: str
    url: str
    thumbnail_url: str


class ExtractRecord(TypedDict):
    """Type definition for a plain-text page extract."""

    full_text: str


class WikipediaTemplate(TypedDict):
    """A numbered, user-editable template slot."""

    key: int
    name: str
    description: str
    value: str


@dataclass(frozen=True)
class ResolvedArticle:
    """Fields merged from the three sources for a single invocation."""

    title: str
    url: str
    description: str
    summary: str
    intro_text: str
    id: int
    key: str
    thumbnail_url: str


@dataclass(frozen=True)
class Resolved:
    article: ResolvedArticle


@dataclass(frozen=True)
class NotFound:
    search_term: str


@dataclass(frozen=True)
class Disambiguation:
    search_term: str
    url: str


@dataclass(frozen=True)
class SourceUnavailable:
    search_term: str
    source: str
    reason: str


@dataclass(frozen=True)
class MalformedResponse:
    search_term: str
    source: str
    field: str


@dataclass(frozen=True)
class Rendered:
    """Final text produced for a resolved article."""

    search_term: str
    text: str


Resolution = Union[Resolved, NotFound, Disambiguation, SourceUnavailable, MalformedResponse]
Outcome = Union[Rendered, NotFound, Disambiguation, SourceUnavailable, MalformedResponse]
