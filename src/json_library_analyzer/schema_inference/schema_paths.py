"""``$``-rooted structural path rendering."""

from __future__ import annotations

import json
import re

ROOT_PATH = "$"
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def child_path(path: str, key: str) -> str:
    """Append an object key using dot notation, or bracket notation when it is not an identifier."""
    if _IDENTIFIER_PATTERN.fullmatch(key):
        return f"{path}.{key}"
    return f"{path}[{json.dumps(key, ensure_ascii=False)}]"


def item_path(path: str) -> str:
    """Append the array element wildcard."""
    return f"{path}[*]"
