from __future__ import annotations

import math

from flask import Blueprint, current_app, jsonify, request

from storefront.errors import BadRequestError, ValidationError
from storefront.utils.commerce import calculate_discount_percentage, get_pagination_info, parse_pagination_args
from storefront.utils.formatting import format_nigerian_phone, format_price
from storefront.utils.ng_locations import NIGERIAN_STATES, normalize_state
from storefront.utils.text import slugify
from storefront.utils.validation import is_valid_email, is_valid_nigerian_phone

meta_bp = Blueprint("meta_bp", __name__, url_prefix="/api/meta")


def _float_arg(name: str, required: bool = False) -> float | None:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        if required:
            raise ValidationError("Invalid query", [{"field": name, "message": f"{name} is required"}])
        return None
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        raise ValidationError("Invalid query", [{"field": name, "message": f"{name} must be a number", "value": raw}])
    return value


@meta_bp.get("/states")
def list_states():
    """Nigerian states for location pickers, in display order."""
    return jsonify({"ok": True, "items": list(NIGERIAN_STATES)}), 200


@meta_bp.post("/validate-contact")
def validate_contact():
    payload = request.get_json(silent=True) or {}
    email = (payload.get("email") or "").strip()
    phone = (payload.get("phone") or "").strip()
    state = (payload.get("state") or "").strip()
    if not (email or phone or state):
        raise BadRequestError("Provide at least one of email, phone or state")

    out = {"ok": True}
    if email:
        out["email_valid"] = is_valid_email(email)
    if phone:
        out["phone_valid"] = is_valid_nigerian_phone(phone)
        out["phone_formatted"] = format_nigerian_phone(phone)
    if state:
        canonical = normalize_state(state)
        out["state_valid"] = canonical is not None
        out["state"] = canonical
    return jsonify(out), 200


@meta_bp.get("/slug")
def make_slug():
    text = request.args.get("text") or ""
    if not text.strip():
        raise BadRequestError("text is required")
    return jsonify({"ok": True, "slug": slugify(text)}), 200


@meta_bp.get("/pagination")
def pagination_preview():
    cfg = current_app.config
    page, limit = parse_pagination_args(
        request.args,
        default_limit=int(cfg.get("DEFAULT_PAGE_LIMIT", 20)),
        max_limit=int(cfg.get("MAX_PAGE_LIMIT", 100)),
    )
    total = _float_arg("total", required=True)
    if total < 0 or total != int(total):
        raise ValidationError("Invalid query", [{"field": "total", "message": "total must be a whole number >= 0", "value": total}])
    info = get_pagination_info(page, limit, int(total))
    return jsonify({"ok": True, "pagination": info.to_dict()}), 200


@meta_bp.get("/price-preview")
def price_preview():
    """Formatted price and discount badge for a listing card."""
    amount = _float_arg("amount", required=True)
    original = _float_arg("original")
    out = {"ok": True, "amount": amount, "display": format_price(amount)}
    if original is not None:
        out["original_display"] = format_price(original)
        out["discount_percentage"] = calculate_discount_percentage(original, amount)
    return jsonify(out), 200
