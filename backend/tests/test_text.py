"""
Tests for storefront.utils.text: slugify() and truncate().
"""

import pytest

from storefront.utils.text import slugify, truncate


# ============================================================================
# TESTS - slugify()
# ============================================================================


def test_slugify_punctuation_and_underscores():
    assert slugify("Hello, World!  Foo_Bar") == "hello-world-foo-bar"


def test_slugify_trims_hyphens():
    assert slugify("  --Naija Jollof Rice--  ") == "naija-jollof-rice"


def test_slugify_drops_non_ascii_letters():
    assert slugify("Café Olé") == "caf-ol"


def test_slugify_empty():
    assert slugify("") == ""
    assert slugify("!!!") == ""


@pytest.mark.parametrize(
    "text",
    [
        "Hello, World!  Foo_Bar",
        "Ankara Print -- Maxi Dress (Size 12)",
        "__leading and trailing__",
        "Ṣọ̀wọ́ Market  ",
        "already-a-slug",
        "\tTabs\tand\nnewlines ",
    ],
)
def test_slugify_is_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once


# ============================================================================
# TESTS - truncate()
# ============================================================================


def test_truncate_cuts_and_appends_ellipsis():
    assert truncate("abcdefgh", 5) == "abcde..."


def test_truncate_short_text_unchanged():
    assert truncate("abc", 5) == "abc"
    assert truncate("abcde", 5) == "abcde"


def test_truncate_trims_trailing_whitespace_before_ellipsis():
    assert truncate("hello world", 6) == "hello..."


def test_slugify_unicode_whitespace_becomes_hyphen():
    assert slugify("Hello\u00a0World") == "hello-world"
    assert slugify("Ankara Print\u3000Gown") == "ankara-print-gown"


def test_slugify_unicode_whitespace_is_idempotent():
    once = slugify("  Lekki\u00a0\u00a0Phase 1 ")
    assert once == "lekki-phase-1"
    assert slugify(once) == once


def test_truncate_negative_length_keeps_nothing():
    assert truncate("abcdefgh", -3) == "..."
