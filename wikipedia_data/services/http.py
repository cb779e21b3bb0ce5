"""
HTTP fetch adapter.

All traffic to the Wikipedia services goes through ``fetch_json`` so that
timeouts, HTTP errors, and undecodable bodies surface as a single
``FetchError`` type.
"""

import logging
from typing import Any, Dict, Iterable, Optional

import requests

from wikipedia_data.errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
USER_AGENT = "WikipediaDataBot/1.0"


def fetch_json(
    source: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    accept_status: Iterable[int] = (),
) -> Any:
    """
    Issues a GET request and returns the decoded JSON body.

    Responses with a status listed in ``accept_status`` are decoded instead
    of being treated as HTTP errors.
    """
    try:
        resp = requests.get(
            url,
            params=params,
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )
        if resp.status_code not in accept_status:
            resp.raise_for_status()
    except requests.RequestException as req_err:
        logger.error("Network error fetching %s: %s", source, req_err)
        raise FetchError(source, str(req_err)) from req_err

    try:
        return resp.json()
    except ValueError as decode_err:
        logger.error("Non-JSON response from %s: %s", source, decode_err)
        raise FetchError(source, "response was not valid JSON") from decode_err
