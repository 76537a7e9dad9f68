"""Helpers for numeric identity handling and timestamps."""
from __future__ import annotations

import datetime as _dt
import re
import sys
from decimal import ROUND_FLOOR, Decimal
from typing import Iterable, Optional

from .model import NodeId

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_BASES = {"x": 16, "o": 8, "b": 2}
_FLOAT_MAX = Decimal(sys.float_info.max)


def numeric_value(node_id: NodeId) -> Optional[int]:
    """Return the floored numeric reading of ``node_id`` or ``None``.

    Integer identities are returned exactly. Labels follow the grammar of a
    JavaScript ``Number()`` conversion: surrounding whitespace is ignored,
    ASCII decimal literals with an optional sign, fraction and exponent are
    accepted, as are unsigned ``0x``/``0o``/``0b`` literals. Underscores,
    non-ASCII digits, ``Infinity`` and decimal values beyond the double range
    read as ``None``. The label ``"5"`` reads as ``5`` and ``"2.5"`` as ``2``.
    """

    if isinstance(node_id, bool):
        return None
    if isinstance(node_id, int):
        return node_id
    if not isinstance(node_id, str):
        return None
    text = node_id.strip()
    prefixed = _PREFIXED.fullmatch(text)
    if prefixed:
        try:
            return int(prefixed.group(2), _BASES[prefixed.group(1).lower()])
        except ValueError:
            return None
    if not _DECIMAL.fullmatch(text):
        return None
    value = Decimal(text)
    if abs(value) > _FLOAT_MAX:
        return None
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def next_default_id(existing: Iterable[NodeId]) -> int:
    """Return the smallest positive integer above every numeric identity."""

    highest = 0
    for node_id in existing:
        value = numeric_value(node_id)
        if value is not None and value > highest:
            highest = value
    return highest + 1


def utc_now() -> str:
    """Return the current UTC time formatted as an ISO 8601 string."""

    return _dt.datetime.now(_dt.timezone.utc).isoformat()
