"""Semantic HTML checks for rendered pages.

Two checks are provided:

* heading hierarchy -- exactly one ``<h1>``, placed first, and no skipped
  level when descending (``h1 → h3`` is invalid, ``h3 → h1`` is fine);
* landmark structure -- the page must contain ``<main>``, ``<header>`` and
  ``<footer>``.
"""

from typing import List, NamedTuple

from bs4 import BeautifulSoup

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

_SEMANTIC_TAGS = ["header", "nav", "main", "article", "section", "aside", "footer"]

_REQUIRED_LANDMARKS = (
    ("main", "Missing <main> element for main content"),
    ("header", "Missing <header> element"),
    ("footer", "Missing <footer> element"),
)


class HeadingNode(NamedTuple):
    level: int
    text: str
    position: int


class ValidationResult(NamedTuple):
    valid: bool
    errors: List[str]


def extract_headings(html: str) -> List[HeadingNode]:
    """Return every ``<h1>``–``<h6>`` in document order with its inner text."""
    soup = BeautifulSoup(html, "lxml")
    return [
        HeadingNode(level=int(tag.name[1]), text=" ".join(tag.get_text().split()), position=position)
        for position, tag in enumerate(soup.find_all(_HEADING_TAGS))
    ]


def validate_heading_hierarchy(headings: List[HeadingNode]) -> ValidationResult:
    if not headings:
        return ValidationResult(valid=True, errors=[])

    errors: List[str] = []

    h1_count = sum(1 for h in headings if h.level == 1)
    if h1_count == 0:
        errors.append("Missing h1 heading")
    elif h1_count > 1:
        errors.append(f"Multiple h1 headings found ({h1_count})")

    if headings[0].level != 1:
        errors.append(f"First heading is h{headings[0].level}, should be h1")

    # Track the deepest level reached so far; descending may add one level at a time
    max_level_seen = 0
    for index, heading in enumerate(headings):
        if heading.level > max_level_seen:
            if heading.level > max_level_seen + 1:
                errors.append(
                    f"Heading level skipped: jumped from h{max_level_seen} to h{heading.level} "
                    f'at position {index} ("{heading.text}")'
                )
            max_level_seen = heading.level

    return ValidationResult(valid=not errors, errors=errors)


def has_semantic_elements(html: str) -> bool:
    soup = BeautifulSoup(html, "lxml")
    return soup.find(_SEMANTIC_TAGS) is not None


def validate_semantic_structure(html: str) -> ValidationResult:
    soup = BeautifulSoup(html, "lxml")
    errors = [message for tag, message in _REQUIRED_LANDMARKS if soup.find(tag) is None]
    return ValidationResult(valid=not errors, errors=errors)
