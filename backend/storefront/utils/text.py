from __future__ import annotations

import re

# \w stays ASCII; \s matches any Unicode whitespace, e.g. U+00A0
_UNSAFE = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")

ELLIPSIS = "..."


def slugify(text: str) -> str:
    """URL slug: "Hello, World!  Foo_Bar" -> "hello-world-foo-bar"."""
    s = (text or "").lower().strip()
    s = _UNSAFE.sub("", s)
    s = _SEPARATORS.sub("-", s)
    return s.strip("-")


def truncate(text: str, length: int) -> str:
    # Only the kept text is bounded by `length`; the ellipsis comes on top.
    if len(text) <= length:
        return text
    return text[:max(length, 0)].rstrip() + ELLIPSIS
