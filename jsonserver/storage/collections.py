from __future__ import annotations

import math
import re
from typing import Any

from ..errors import InvalidBody

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def exists(doc: dict, name: str) -> bool:
    return name in doc


def get_or_create(doc: dict, name: str) -> tuple[Any, bool]:
    """Return ``doc[name]``, binding a fresh empty list first if the key is absent.

    Nothing is persisted here; the caller decides whether to save.
    """
    if name in doc:
        return doc[name], False
    doc[name] = []
    return doc[name], True


def items_of(value) -> list:
    """Items of a collection value; non-list values hold none."""
    return value if isinstance(value, list) else []


def _is_number(v) -> bool:
    if isinstance(v, bool):
        return False
    return isinstance(v, int) or (isinstance(v, float) and math.isfinite(v))


def _numeric_id(item):
    """The item's id if it is a finite number (int or float), else 0."""
    v = item.get("id") if isinstance(item, dict) else None
    return v if _is_number(v) else 0


def next_id(items: list) -> int:
    """
    Next free id: the first integer above the highest numeric id, so ids are
    never reused and always exceed fractional ids too (10.5 -> 11).
    """
    if not items:
        return 1
    return math.floor(max(_numeric_id(it) for it in items)) + 1


def parse_id(raw) -> int | None:
    """
    Lenient integer parse of a path segment or payload id.
    Takes the leading integer prefix ("12abc" -> 12); anything else is None,
    which never matches a stored id.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    m = _LEADING_INT.match(str(raw or ""))
    return int(m.group(1)) if m else None


def find_index(items: list, item_id) -> int:
    """Position of the first item whose id equals ``item_id`` after coercion, or -1."""
    wanted = parse_id(item_id)
    if wanted is None:
        return -1
    for idx, it in enumerate(items):
        v = it.get("id") if isinstance(it, dict) else None
        if _is_number(v) and v == wanted:
            return idx
    return -1


def is_valid_item(payload) -> bool:
    return isinstance(payload, dict)


def decode_item(payload, *, what: str = "a valid JSON object") -> dict:
    if not is_valid_item(payload):
        raise InvalidBody(f"Request body must be {what}")
    return payload
