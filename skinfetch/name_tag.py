from __future__ import annotations

"""
Name-tag scraping.

The inventory service has no structured name-tag field. A renamed item only
shows up through a fraud warning such as::

    Name Tag: ''你不需要登顶 在山脚我也爱你''

so the tag is cut out between the fixed prefix and the next double single
quote. Everything that depends on that format lives here.
"""

from typing import Iterable, Optional

from .config import NAME_TAG_DELIMITER, NAME_TAG_PREFIX


def extract_name_tag(warning: str) -> Optional[str]:
    """
    Return the tag text from one warning string, or None if it carries none.

    None means "no tag found" and is distinct from "" (a tag that was set
    but left blank, i.e. ``Name Tag: ''''``).
    """
    if not warning:
        return None
    start = warning.find(NAME_TAG_PREFIX)
    if start < 0:
        return None
    start += len(NAME_TAG_PREFIX)
    end = warning.find(NAME_TAG_DELIMITER, start)
    if end < 0:
        return None
    return warning[start:end]


def find_name_tag(warnings: Optional[Iterable[str]]) -> Optional[str]:
    """First tag found across an item's warnings, in order."""
    for warning in warnings or ():
        tag = extract_name_tag(warning)
        if tag is not None:
            return tag
    return None
