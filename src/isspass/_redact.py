"""Helpers for safe debug logging.

Every lookup in isspass handles the caller's public IP address, which
identifies them.  This module masks addresses and truncates long bodies
before they reach DEBUG logs.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

_IPV4_RE = re.compile(r"\b(\d{1,3})\.(\d{1,3})\.\d{1,3}\.\d{1,3}\b")
# At least four groups so clock times like "12:30:45" are left alone.
_IPV6_RE = re.compile(r"\b([0-9A-Fa-f]{1,4}):([0-9A-Fa-f]{1,4})(?::[0-9A-Fa-f]{0,4}){2,6}")

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset({"ip", "ipaddress", "ip_address", "query"})


def mask_ip(text: str) -> str:
    """Keep the network prefix of every IP literal in *text* and hide the rest."""
    masked = _IPV4_RE.sub(r"\1.\2.x.x", text)
    return _IPV6_RE.sub(r"\1:\2:…", masked)


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        value = mask_ip(value)
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SENSITIVE_VALUE_KEYS and isinstance(v, str):
                redacted[key] = mask_ip(v) if _IPV4_RE.search(v) or _IPV6_RE.search(v) else "<redacted>"
            else:
                redacted[key] = redact_for_log(v, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
