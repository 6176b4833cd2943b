"""Permissive regex scanning of opening tags and their attributes.

Input is arbitrary third-party HTML, so nothing here raises: markup that
does not fit the patterns is simply not captured.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterator

# name="value" or name='value'; unquoted values are not captured
_ATTRIBUTE_RE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


@dataclass
class ParsedTag:
    """Attributes of a single opening tag, keyed by lowercase name."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)

    def get(self, attribute: str, default: str | None = None) -> str | None:
        return self.attributes.get(attribute.lower(), default)


def parse_attributes(tag: str) -> dict[str, str]:
    """Map lowercase attribute names to trimmed values; last occurrence wins."""
    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE_RE.finditer(tag):
        raw_name, double_quoted, single_quoted = match.groups()
        value = double_quoted if double_quoted is not None else single_quoted
        attributes[raw_name.lower()] = (value or "").strip()
    return attributes


# Upper bound on how far a ">" inside a quoted value may extend a tag
_MAX_TAG_LENGTH = 4096

_QUOTED_RE = re.compile(r""""[^"]*"|'[^']*'""")


@lru_cache(maxsize=8)
def _tag_patterns(name: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    escaped = re.escape(name)
    plain = re.compile(rf"<{escaped}\b[^>]*>", re.IGNORECASE)
    quote_aware = re.compile(
        rf"""<{escaped}\b(?:[^>"']|"[^"]*"|'[^']*')*>""",
        re.IGNORECASE,
    )
    return plain, quote_aware


def _has_open_quote(tag: str) -> bool:
    unquoted = _QUOTED_RE.sub("", tag)
    return '"' in unquoted or "'" in unquoted


def iter_tags(html: str, name: str) -> Iterator[ParsedTag]:
    """Yield every opening ``<name ...>`` tag in document order.

    A tag runs up to the first ``>``. When that ``>`` sits inside a quoted
    value, attributes past it are picked up as well; attributes before it
    always take precedence.
    """
    tag_name = name.lower()
    plain, quote_aware = _tag_patterns(tag_name)
    for match in plain.finditer(html):
        attributes = parse_attributes(match.group(0))
        if _has_open_quote(match.group(0)):
            start = match.start()
            extended = quote_aware.match(html, start, min(len(html), start + _MAX_TAG_LENGTH))
            if extended is not None and extended.end() > match.end():
                attributes = {**parse_attributes(extended.group(0)), **attributes}
        yield ParsedTag(name=tag_name, attributes=attributes)
