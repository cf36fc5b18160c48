"""Masking and size limits for values passed to debug logs.

Event listings can hold hundreds of records and request bodies may carry
credentials, so transport logging goes through :func:`redact_for_log`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

MASK = "<redacted>"

# Compared after dropping "-" and "_" and lowercasing, so ``access_token``,
# ``accessToken`` and ``Access-Token`` all match ``accesstoken``.
SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "token",
        "accesstoken",
        "refreshtoken",
        "authorization",
        "cookie",
        "email",
    }
)


def is_sensitive_key(key: object) -> bool:
    return str(key).replace("-", "").replace("_", "").lower() in SENSITIVE_KEYS


@dataclass(frozen=True, slots=True)
class _LogShaper:
    max_string: int
    max_items: int
    max_depth: int = 10

    def shape(self, value: Any, depth: int = 0) -> Any:
        if depth > self.max_depth:
            return "<max-depth>"
        if value is None or isinstance(value, (bool, int, float)):
            return value
        if isinstance(value, str):
            return self._clip(value)
        if isinstance(value, Mapping):
            return {
                str(key): MASK if is_sensitive_key(key) else self.shape(item, depth + 1)
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple, set, frozenset)):
            return self._shape_items(list(value), depth)
        return repr(value)

    def _clip(self, text: str) -> str:
        if len(text) <= self.max_string:
            return text
        return f"{text[: self.max_string]}…<truncated>"

    def _shape_items(self, items: list[Any], depth: int) -> list[Any]:
        shaped = [self.shape(item, depth + 1) for item in items[: self.max_items]]
        hidden = len(items) - self.max_items
        if hidden > 0:
            shaped.append(f"<+{hidden} more>")
        return shaped


def redact_for_log(value: Any, *, max_string: int = 256, max_items: int = 20) -> Any:
    """Return a copy of *value* with secrets masked and long content cut."""
    return _LogShaper(max_string=max_string, max_items=max_items).shape(value)
