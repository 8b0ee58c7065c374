"""Lenient parsing of ids taken from paths and request bodies."""

from __future__ import annotations

import re
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

# Signed 64-bit INTEGER range of the storage engine
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


def parse_int(value: object) -> Optional[int]:
    """Read the leading integer of ``value``.

    ``"12"`` and ``"12abc"`` give 12, floats are truncated, and anything
    without leading ASCII digits (``"abc"``, ``""``, ``None``) gives ``None``.
    Integers the database cannot store also give ``None``; no row can have
    such an id.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        parsed = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return None
        parsed = int(match.group(1))
    if parsed < _MIN_ID or parsed > _MAX_ID:
        return None
    return parsed


__all__ = ["parse_int"]
