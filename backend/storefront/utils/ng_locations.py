from __future__ import annotations

from typing import Literal, get_args

# 36 states + the Federal Capital Territory, in the order shown in state pickers
NigerianState = Literal[
    "Abia",
    "Adamawa",
    "Akwa Ibom",
    "Anambra",
    "Bauchi",
    "Bayelsa",
    "Benue",
    "Borno",
    "Cross River",
    "Delta",
    "Ebonyi",
    "Edo",
    "Ekiti",
    "Enugu",
    "FCT - Abuja",
    "Gombe",
    "Imo",
    "Jigawa",
    "Kaduna",
    "Kano",
    "Katsina",
    "Kebbi",
    "Kogi",
    "Kwara",
    "Lagos",
    "Nasarawa",
    "Niger",
    "Ogun",
    "Ondo",
    "Osun",
    "Oyo",
    "Plateau",
    "Rivers",
    "Sokoto",
    "Taraba",
    "Yobe",
    "Zamfara",
]

NIGERIAN_STATES: tuple[NigerianState, ...] = get_args(NigerianState)

_STATE_BY_LOWER = {s.lower(): s for s in NIGERIAN_STATES}
# Common short forms for the capital territory
_STATE_BY_LOWER.update({"fct": "FCT - Abuja", "abuja": "FCT - Abuja"})


def normalize_state(value: str | None) -> NigerianState | None:
    """Map free-form input ("lagos ", "FCT") to the canonical state name."""
    if not value:
        return None
    v = str(value).strip().lower()
    if not v:
        return None
    return _STATE_BY_LOWER.get(v)


def is_valid_state(value: str | None) -> bool:
    s = (value or "").strip()
    return s in NIGERIAN_STATES
