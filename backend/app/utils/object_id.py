"""Document-store style object identifiers.

An id is 12 bytes rendered as 24 lowercase hex characters: a 4-byte
big-endian seconds timestamp followed by 8 random bytes.
"""

from __future__ import annotations

import os
import re
import time
from typing import Any

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def generate_object_id() -> str:
    timestamp = int(time.time()).to_bytes(4, "big")
    return (timestamp + os.urandom(8)).hex()


def is_valid_object_id(value: Any) -> bool:
    return isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None
