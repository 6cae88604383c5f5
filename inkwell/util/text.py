"""Plain-text helpers for user-submitted content."""

import re

from bs4 import BeautifulSoup

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

# Elements whose body is code, not reader-visible text
_DROPPED_ELEMENTS = ("script", "style")


def sanitize_text(content: str) -> str:
    """Reduce user input to plain text.

    Removes control characters (keeping tab, newline and carriage return)
    and HTML markup, then trims surrounding whitespace. Markup is parsed
    with BeautifulSoup, so a bare ``<`` or ``>`` that does not open a tag
    is kept as text.

    Args:
        content: Raw user input

    Returns:
        Sanitized text, possibly empty
    """
    clean = _CONTROL_CHARS.sub("", content)
    soup = BeautifulSoup(clean, "html.parser")
    for element in soup(_DROPPED_ELEMENTS):
        element.decompose()
    return soup.get_text().strip()
