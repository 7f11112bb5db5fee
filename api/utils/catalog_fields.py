"""Field-level cleaning helpers for raw catalog rows."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Mapping, Sequence

# Canonical field -> source columns, first non-empty wins
FIELD_ALIASES = {
    "sku": ("sku", "code"),
    "title": ("title", "name", "product_name"),
    "price": ("price", "price_cents", "price_gbp"),
    "description": ("description", "collection_description"),
    "colour": ("colour", "color"),
    "material": ("material",),
    "category": ("category", "product_kind"),
    "style": ("style",),
    "room": ("room",),
    "width": ("Width", "width"),
    "depth": ("Depth", "depth"),
    "height": ("Height", "height"),
    "image_url": ("image_url", "base_image"),
    "cutout_local_path": ("cutout_local_path",),
}

CENTS_THRESHOLD = 1000

_DIGITS_ONLY = re.compile(r"^\d+$")
_DECIMAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_UNIT_CM = re.compile(r"cm", re.IGNORECASE)
_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)
_TWO_PLACES = Decimal("0.01")


def as_text(value: Any) -> str:
    """Coerce a raw cell to a trimmed string; None and NaN become empty."""
    if value is None:
        return ""
    if isinstance(value, float) and value != value:
        return ""
    return str(value).strip()


def first_present(row: Mapping[str, Any], aliases: Sequence[str]) -> str:
    for alias in aliases:
        value = as_text(row.get(alias))
        if value:
            return value
    return ""


def interpret_price(raw: Any) -> str:
    """
    Convert a raw price to a 2-decimal string.

    All-digit values above CENTS_THRESHOLD are treated as minor units
    (pence/cents) and divided by 100. Anything non-numeric yields "".

    Integral numeric cells (e.g. 79900.0 from a non-CSV source) go through
    the same rule as digit strings.

    Args:
        raw: Raw price cell

    Returns:
        Canonical price such as "799.00", or "" when unparseable
    """
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)

    text = as_text(raw)
    if not text or not _DECIMAL.match(text):
        return ""

    try:
        value = Decimal(text)
        if _DIGITS_ONLY.match(text) and value > CENTS_THRESHOLD:
            value = value / 100
        return str(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return ""


def clean_dimension(raw: Any) -> str:
    """Strip any "cm" unit token; the remainder is not validated."""
    return _UNIT_CM.sub("", as_text(raw)).strip()


def is_absolute_url(value: str) -> bool:
    return bool(_ABSOLUTE_URL.match(value))


def resolve_asset_url(raw: Any, base_url: str) -> str:
    """
    Anchor a relative asset path under base_url.

    Absolute http(s) URLs pass through unchanged and an empty path stays
    empty rather than collapsing to the bare base URL.
    """
    path = as_text(raw)
    if not path:
        return ""
    if is_absolute_url(path):
        return path
    if path.startswith("/"):
        path = path[1:]
    return f"{base_url.rstrip('/')}/{path}"
