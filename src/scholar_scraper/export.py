"""Export utilities for search results."""

from __future__ import annotations

from pydantic import TypeAdapter

from scholar_scraper.models import SearchResult

_RESULTS_ADAPTER = TypeAdapter(list[SearchResult])


def export_json(results: list[SearchResult], indent: int = 2) -> str:
    """Serialize results to a JSON array string."""
    return _RESULTS_ADAPTER.dump_json(results, indent=indent).decode("utf-8")


def export_markdown(results: list[SearchResult]) -> str:
    """Generate Markdown table of results."""
    header = "| # | Title | Authors | Link |"
    sep = "|---|-------|---------|------|"
    rows = []
    for i, result in enumerate(results, 1):
        title = _cell(result.title)
        author = _cell(result.author) or "-"
        rows.append(f"| {i} | {title} | {author} | {result.link} |")
    return "\n".join([header, sep] + rows)


def _cell(text: str) -> str:
    """Collapse whitespace and escape pipes so text fits in one table cell."""
    return " ".join(text.split()).replace("|", r"\|")
