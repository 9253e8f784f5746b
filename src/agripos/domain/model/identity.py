"""Identifier and clock helpers.

Identifiers follow the format already present in the shop's data:
a short prefix, random hex, then the millisecond timestamp in hex.
"""

from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone

PRODUCT_PREFIX = "pr"
CUSTOMER_PREFIX = "c"
ORDER_PREFIX = "o"


def new_id(prefix: str) -> str:
    millis = int(time.time() * 1000)
    return f"{prefix}{secrets.token_hex(6)}{millis:x}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
