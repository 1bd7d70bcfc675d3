from storefront.utils.commerce import (
    PaginationInfo,
    calculate_discount_percentage,
    calculate_total_weight,
    get_pagination_info,
    parse_pagination_args,
)
from storefront.utils.formatting import (
    format_date,
    format_datetime,
    format_file_size,
    format_nigerian_phone,
    format_price,
    get_relative_time,
)
from storefront.utils.grouping import deep_clone, generate_random_string, group_by, remove_duplicates
from storefront.utils.ng_locations import NIGERIAN_STATES, NigerianState, is_valid_state, normalize_state
from storefront.utils.text import slugify, truncate
from storefront.utils.ui import cn, debounce, throttle
from storefront.utils.validation import is_valid_email, is_valid_nigerian_phone

__all__ = [
    "NIGERIAN_STATES",
    "NigerianState",
    "PaginationInfo",
    "calculate_discount_percentage",
    "calculate_total_weight",
    "cn",
    "debounce",
    "deep_clone",
    "format_date",
    "format_datetime",
    "format_file_size",
    "format_nigerian_phone",
    "format_price",
    "generate_random_string",
    "get_pagination_info",
    "get_relative_time",
    "group_by",
    "is_valid_email",
    "is_valid_nigerian_phone",
    "is_valid_state",
    "normalize_state",
    "parse_pagination_args",
    "remove_duplicates",
    "slugify",
    "throttle",
    "truncate",
]
