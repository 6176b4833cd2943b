"""Backlink and badge checker tests."""

from toolcategory.verification.checks import has_backlink, has_badge

DOMAIN = "https://toolcategory.com/"
BADGE_SRC = "https://toolcategory.com/badge-light.svg"
BADGE_ALT = "Featured on ToolCategory.com"


# --- has_backlink ---


def test_backlink_with_path():
    assert has_backlink('<a href="https://toolcategory.com/foo">x</a>', DOMAIN)


def test_backlink_with_query_string():
    assert has_backlink('<a href="https://toolcategory.com/?ref=acme">x</a>', DOMAIN)


def test_backlink_other_domain_only():
    assert not has_backlink('<a href="https://other.com">x</a>', DOMAIN)


def test_backlink_uppercase_attribute_names():
    assert has_backlink("<A HREF='https://toolcategory.com/'>x</A>", DOMAIN)


def test_backlink_no_anchors():
    assert not has_backlink("<p>https://toolcategory.com/</p>", DOMAIN)


def test_backlink_requires_trailing_slash_form():
    # Substring of the canonical root, so the bare host does not count
    assert not has_backlink('<a href="https://toolcategory.com">x</a>', DOMAIN)


def test_backlink_later_anchor_matches():
    html = '<a href="/about">About</a><a>no href</a><a href="https://toolcategory.com/item/1">x</a>'
    assert has_backlink(html, DOMAIN)


def test_backlink_ignores_image_src():
    assert not has_backlink(f'<img src="{BADGE_SRC}" alt="{BADGE_ALT}">', DOMAIN)


def test_backlink_custom_domain():
    assert has_backlink('<a href="http://localhost:3000/item">x</a>', "http://localhost:3000/")


# --- has_badge ---


def test_badge_exact_match():
    assert has_badge(f'<img src="{BADGE_SRC}" alt="{BADGE_ALT}">', BADGE_SRC, BADGE_ALT)


def test_badge_attribute_order_irrelevant():
    assert has_badge(f"<img alt='{BADGE_ALT}' class='b' src='{BADGE_SRC}' />", BADGE_SRC, BADGE_ALT)


def test_badge_alt_case_differs():
    html = f'<img src="{BADGE_SRC}" alt="Featured on toolcategory.com">'
    assert not has_badge(html, BADGE_SRC, BADGE_ALT)


def test_badge_alt_inner_whitespace_differs():
    html = f'<img src="{BADGE_SRC}" alt="Featured  on ToolCategory.com">'
    assert not has_badge(html, BADGE_SRC, BADGE_ALT)


def test_badge_dark_variant_rejected():
    html = f'<img src="https://toolcategory.com/badge-dark.svg" alt="{BADGE_ALT}">'
    assert not has_badge(html, BADGE_SRC, BADGE_ALT)


def test_badge_missing_alt():
    assert not has_badge(f'<img src="{BADGE_SRC}">', BADGE_SRC, BADGE_ALT)


def test_badge_src_and_alt_on_different_images():
    html = f'<img src="{BADGE_SRC}" alt="logo"><img src="/other.svg" alt="{BADGE_ALT}">'
    assert not has_badge(html, BADGE_SRC, BADGE_ALT)


def test_badge_entity_encoded_alt_not_decoded():
    html = f'<img src="{BADGE_SRC}" alt="Featured on ToolCategory&#46;com">'
    assert not has_badge(html, BADGE_SRC, BADGE_ALT)


def test_badge_surrounding_whitespace_trimmed():
    html = f'<img src=" {BADGE_SRC} " alt=" {BADGE_ALT}">'
    assert has_badge(html, BADGE_SRC, BADGE_ALT)


def test_backlink_with_lt_in_other_attribute():
    assert has_backlink('<a href="https://toolcategory.com/" title="a < b">x</a>', DOMAIN)


def test_badge_with_stray_quote_in_other_attribute():
    html = f"<img src=\"{BADGE_SRC}\" alt=\"{BADGE_ALT}\" data-note=it's>"
    assert has_badge(html, BADGE_SRC, BADGE_ALT)
