"""Backlink and badge checks over a fetched HTML document."""

from __future__ import annotations

from .html import iter_tags


def has_backlink(html: str, canonical_domain: str) -> bool:
    """True if any ``<a href>`` contains *canonical_domain*.

    Substring match: paths, query strings and anything else after the
    domain still count.
    """
    for anchor in iter_tags(html, "a"):
        href = anchor.get("href")
        if href and canonical_domain in href:
            return True
    return False


def has_badge(html: str, badge_src: str, badge_alt: str) -> bool:
    """True if any ``<img>`` carries exactly *badge_src* and *badge_alt*.

    No case or whitespace normalisation: the embed must be the unmodified
    snippet we hand out.
    """
    for image in iter_tags(html, "img"):
        if image.get("src") == badge_src and image.get("alt") == badge_alt:
            return True
    return False
