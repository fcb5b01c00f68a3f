"""Helpers for reading JSON request bodies."""
from flask import request

from storefront.utils.number_format import is_whole_number


def get_json_payload() -> dict:
    """Request body as a dict. Missing, invalid or non-object JSON reads as empty."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return {}
    return payload


def coerce_quantity(value):
    """
    Turn JSON quantities like ``2``, ``2.0`` or ``"2"`` into ints.

    Anything else is returned untouched so the service layer rejects it
    with its own message.
    """
    if is_whole_number(value):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip('-').isdigit():
            return int(text)
    return value


def coerce_id(value):
    """Ids travel as strings; numeric JSON ids are accepted too."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and is_whole_number(value):
        return str(int(value))
    if isinstance(value, str):
        return value.strip() or None
    return None
