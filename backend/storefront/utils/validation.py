from __future__ import annotations

import re

# UI-level sanity check only, not RFC 5322
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# +234XXXXXXXXXX, 234XXXXXXXXXX, 0XXXXXXXXXX with a 7/8/9 network prefix
NG_PHONE_RE = re.compile(r"(\+?234|0)[789]\d{9}", re.ASCII)

_WHITESPACE = re.compile(r"\s")


def is_valid_email(email: str | None) -> bool:
    if not email:
        return False
    return EMAIL_RE.fullmatch(email) is not None


def is_valid_nigerian_phone(phone: str | None) -> bool:
    if not phone:
        return False
    return NG_PHONE_RE.fullmatch(_WHITESPACE.sub("", phone)) is not None
