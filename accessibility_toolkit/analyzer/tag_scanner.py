"""
HTML tag scanner shared by the structural analyzers.

A tolerant, pattern-based scanner over raw HTML text. It is not a full
parser: it does not understand nesting, comments, or script/style content,
and never raises on malformed markup. Unmatched constructs are simply not
counted.
"""

import html
import re
from collections import Counter
from typing import Dict, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup


# Opening tags only: closing tags and doctype/comment markers start with
# a non-word character after "<"
OPEN_TAG_PATTERN = re.compile(r'<(\w+)(?:\s|>|/)', re.IGNORECASE)

TAG_PATTERN = re.compile(r'<[^>]*>')


def count_elements(html: str) -> Dict[str, int]:
    """
    Count opening-tag occurrences by tag name.

    Args:
        html: HTML text

    Returns:
        Mapping of lowercased tag name to occurrence count
    """
    counts = Counter(
        match.group(1).lower() for match in OPEN_TAG_PATTERN.finditer(html)
    )
    return dict(counts)


def attribute_pattern(name: str, allow_empty: bool = False) -> re.Pattern:
    """
    Build a pattern capturing a quoted attribute value.

    Args:
        name: Attribute name
        allow_empty: Whether an empty value counts as a match

    Returns:
        Compiled pattern whose first group is the value
    """
    value = r'[^"\']*' if allow_empty else r'[^"\']+'
    return re.compile(rf'{re.escape(name)}=["\']({value})["\']')


def get_attribute(
    attributes: str,
    name: str,
    allow_empty: bool = False
) -> Optional[str]:
    """
    Extract a quoted attribute value from a tag's attribute string.

    Args:
        attributes: Raw text between the tag name and ">"
        name: Attribute name
        allow_empty: Whether an empty value counts as present

    Returns:
        Attribute value, or None when absent
    """
    match = attribute_pattern(name, allow_empty).search(attributes)
    return match.group(1) if match else None


def has_attribute(attributes: str, name: str) -> bool:
    """Check whether an attribute with a quoted value is present."""
    return re.search(rf'{re.escape(name)}=["\']', attributes) is not None


def inner_text(fragment: str) -> str:
    """
    Get the text content of an HTML fragment with inner markup removed.

    Character references are decoded so the text reads the way assistive
    technology announces it.

    Args:
        fragment: HTML fragment

    Returns:
        Stripped text content
    """
    if '<' not in fragment and '&' not in fragment:
        return fragment.strip()
    try:
        text = BeautifulSoup(fragment, 'html.parser').get_text()
    except ParserRejectedMarkup:
        # Markup html.parser cannot tokenize, such as a bare "<![", is
        # stripped tag by tag instead
        text = html.unescape(TAG_PATTERN.sub('', fragment))
    return text.strip()
