"""
Exceptions raised while talking to the Wikipedia services.

Both are converted into outcome variants by the resolution pipeline and are
never expected to reach the caller.
"""


class FetchError(Exception):
    """A request failed, timed out, or did not return JSON."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class MalformedResponseError(Exception):
    """A payload is missing a field its parser requires."""

    def __init__(self, source: str, field: str):
        super().__init__(f"{source}: missing or invalid '{field}'")
        self.source = source
        self.field = field
