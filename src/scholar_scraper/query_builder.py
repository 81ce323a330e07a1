"""Query builder: QueryParameters -> search URL."""

from __future__ import annotations

import logging
from urllib.parse import quote, urlsplit, urlunsplit

from scholar_scraper.exceptions import (
    InvalidServiceError,
    MalformedURLError,
    MissingRequiredFieldError,
)
from scholar_scraper.models import QueryParameters, ServiceTarget, SortMode

logger = logging.getLogger(__name__)

_BASE_URLS: dict[ServiceTarget, str] = {
    ServiceTarget.SCHOLAR: "https://scholar.google.com/scholar?",
}

# Printable ASCII left untouched in the query. Space, '"', '#', "'", '<' and
# '>' are escaped, as are controls and non-ASCII. The fragment keeps '#' and
# "'" but escapes the backtick.
_QUERY_SAFE = "!$%&()*+,-./:;=?@[\\]^_`{|}~"
_FRAGMENT_SAFE = "!#$%&'()*+,-./:;=?@[\\]^_{|}~"
# Stripped from both ends of a URL before parsing.
_C0_CONTROL_OR_SPACE = "".join(chr(c) for c in range(0x21))


def get_base_url(service: ServiceTarget) -> str:
    try:
        return _BASE_URLS[service]
    except KeyError:
        raise InvalidServiceError(f"Unknown service: {service!r}") from None


def _flag(value: bool, on: str, off: str) -> str:
    return on if value else off


def _query_pairs(params: QueryParameters) -> list[tuple[str, str]]:
    """Optional parameters in their fixed URL order. Absent fields are skipped."""
    pairs: list[tuple[str, str]] = []
    if params.cite_id is not None:
        pairs.append(("cites", params.cite_id))
    if params.from_year is not None:
        pairs.append(("as_ylo", str(params.from_year)))
    if params.to_year is not None:
        pairs.append(("as_yhi", str(params.to_year)))
    if params.sort_mode is not None and 0 <= params.sort_mode < len(SortMode):
        pairs.append(("scisbd", str(int(params.sort_mode))))
    if params.cluster_id is not None:
        pairs.append(("cluster", params.cluster_id))
    if params.lang is not None:
        pairs.append(("hl", params.lang))
    if params.lang_limit is not None:
        pairs.append(("lr", params.lang_limit))
    if params.limit is not None:
        pairs.append(("num", str(params.limit)))
    if params.offset is not None:
        pairs.append(("start", str(params.offset)))
    if params.adult_filter is not None:
        pairs.append(("safe", _flag(params.adult_filter, "active", "off")))
    if params.similar_results is not None:
        pairs.append(("filter", _flag(params.similar_results, "1", "0")))
    if params.citations is not None:
        pairs.append(("as_vis", _flag(params.citations, "1", "0")))
    return pairs


def normalize_url(raw: str) -> str:
    """Parse an absolute URL and return its normalized text form.

    Raises MalformedURLError when the string is not an absolute http(s) URL.
    """
    try:
        parts = urlsplit(raw.strip(_C0_CONTROL_OR_SPACE))
        # Accessing .port validates it.
        parts.port
    except ValueError as exc:
        raise MalformedURLError(f"Could not parse URL {raw!r}: {exc}") from exc

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise MalformedURLError(f"Not an absolute http(s) URL: {raw!r}")

    return urlunsplit((
        parts.scheme.lower(),
        parts.netloc.lower(),
        quote(parts.path or "/", safe=_QUERY_SAFE),
        quote(parts.query, safe=_QUERY_SAFE),
        quote(parts.fragment, safe=_FRAGMENT_SAFE),
    ))


def build_url(
    params: QueryParameters,
    service: ServiceTarget = ServiceTarget.SCHOLAR,
) -> str:
    """Serialize *params* into a search URL for *service*.

    ``q`` always comes first; the optional parameters follow in a fixed
    order so the same parameters always produce the same URL.
    """
    if not params.query:
        raise MissingRequiredFieldError("query must not be empty")

    url = get_base_url(service) + "q=" + params.query
    for key, value in _query_pairs(params):
        url += f"&{key}={value}"

    normalized = normalize_url(url)
    logger.debug("Built search URL: %s", normalized)
    return normalized
