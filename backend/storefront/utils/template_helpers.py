from __future__ import annotations

from flask import Flask

from storefront.utils.formatting import (
    format_date,
    format_datetime,
    format_file_size,
    format_nigerian_phone,
    format_price,
    get_relative_time,
)
from storefront.utils.ng_locations import NIGERIAN_STATES
from storefront.utils.text import slugify, truncate
from storefront.utils.ui import cn

TEMPLATE_FILTERS = {
    "price": format_price,
    "date": format_date,
    "datetime": format_datetime,
    "relative_time": get_relative_time,
    "file_size": format_file_size,
    "phone": format_nigerian_phone,
    "slugify": slugify,
    # Jinja already ships a `truncate` filter with different semantics
    "truncate_text": truncate,
}


def register_template_helpers(app: Flask) -> None:
    for name, fn in TEMPLATE_FILTERS.items():
        app.add_template_filter(fn, name)
    app.add_template_global(cn, "cn")
    app.add_template_global(NIGERIAN_STATES, "nigerian_states")
