"""
Base classes and interfaces for response parsers.

This module defines the contract that all Wikipedia response parsers must
follow, plus the field lookup helpers they share.
"""

from typing import Any, Protocol, TypeVar

from wikipedia_data.errors import MalformedResponseError

RecordT = TypeVar("RecordT", covariant=True)


class ResponseParser(Protocol[RecordT]):
    """
    Protocol for response parsers.

    Classes implementing this protocol turn one decoded JSON payload from a
    single upstream service into a typed record. Parsing is pure: no network
    access happens here.
    """

    source: str

    def parse(self, payload: Any) -> RecordT:
        """Normalizes a decoded payload."""


def require(source: str, payload: Any, *path: str) -> Any:
    """Walks ``path`` through nested mappings, failing on the first gap."""
    node = payload
    walked = []
    for name in path:
        walked.append(name)
        if not isinstance(node, dict) or node.get(name) is None:
            raise MalformedResponseError(source, ".".join(walked))
        node = node[name]
    return node


def optional_text(payload: Any, *path: str) -> str:
    """Like ``require`` but yields an empty string for absent values."""
    node = payload
    for name in path:
        if not isinstance(node, dict) or node.get(name) is None:
            return ""
        node = node[name]
    return node if isinstance(node, str) else ""
