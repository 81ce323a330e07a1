"""Result extractor: Scholar results page HTML -> SearchResult[]."""

from __future__ import annotations

import logging

import soupsieve as sv
from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag
from bs4.element import CData, NavigableString, Script, Stylesheet, TemplateString

from scholar_scraper.exceptions import ParseError
from scholar_scraper.models import SearchResult

logger = logging.getLogger(__name__)

_BLOCK = sv.compile(".gs_ri")
_TITLE = sv.compile(".gs_rt")
_ABSTRACT = sv.compile(".gs_rs")
_AUTHOR = sv.compile(".gs_a")
_LINK = sv.compile("a")

# Every text node type; comments, doctypes and the like are left out.
_TEXT_TYPES = (NavigableString, CData, Script, Stylesheet, TemplateString)


def _text(node: Tag) -> str:
    """Concatenate all descendant text of *node* in document order."""
    return node.get_text(types=_TEXT_TYPES)


def _parse_document(html_text: str) -> BeautifulSoup:
    if not isinstance(html_text, str):
        raise ParseError(f"Expected HTML text, got {type(html_text).__name__}")
    try:
        return BeautifulSoup(html_text, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"HTML parser rejected document: {exc}") from exc


def _extract_block(block: Tag) -> SearchResult | None:
    """Build a SearchResult from one result block.

    Returns None if any of title, abstract, author line or link is missing.
    """
    title = _TITLE.select_one(block)
    if title is None:
        return None

    # First anchor anywhere in the block, not only inside the title.
    anchor = _LINK.select_one(block)
    link = anchor.get("href") if anchor is not None else None
    if link is None:
        return None

    abstract = _ABSTRACT.select_one(block)
    if abstract is None:
        return None

    author = _AUTHOR.select_one(block)
    if author is None:
        return None

    return SearchResult(
        title=_text(title),
        author=_text(author),
        abstract=_text(abstract),
        link=str(link),
    )


def extract(html_text: str) -> list[SearchResult]:
    """Extract every complete result block from *html_text*, in document order.

    Incomplete blocks are skipped, so a page without usable results yields
    an empty list rather than an error.
    """
    document = _parse_document(html_text)
    blocks = _BLOCK.select(document)

    results: list[SearchResult] = []
    for index, block in enumerate(blocks):
        result = _extract_block(block)
        if result is None:
            logger.debug("Skipping incomplete result block #%d", index)
            continue
        results.append(result)

    logger.debug("Extracted %d of %d result blocks", len(results), len(blocks))
    return results
