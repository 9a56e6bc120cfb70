"""
Small helpers shared by the toolkit and the test suites.
"""

import json
import random
import string
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Sequence, TypeVar

T = TypeVar("T")

_ALPHABET = string.ascii_letters + string.digits


def random_string(length: int = 8) -> str:
    """Return a random string of ASCII letters and digits."""
    return "".join(random.choice(_ALPHABET) for _ in range(length))


def pick(items: Sequence[T]) -> T:
    """
    Pick a random element.

    Raises:
        ValueError: If ``items`` is empty
    """
    if not items:
        raise ValueError("pick() from empty sequence")
    return random.choice(items)


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-01T10:00:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _safe_str(obj: Any, convert=str) -> str:
    try:
        return convert(obj)
    except Exception:
        return f"<unserializable {type(obj).__name__}>"


def safe_json_serialize(obj: Any) -> Any:
    """
    Safely serializes an object to JSON-compatible format.

    Used as the ``default`` hook of ``json.dumps``. Handles common
    non-serializable types like datetime, bytes, sets, enums and exceptions.
    Objects whose ``__str__`` raises become ``<unserializable TypeName>``.
    """
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    elif isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, BaseException):
        return f"{type(obj).__name__}: {_safe_str(obj)}"
    elif hasattr(obj, "__dict__"):
        return vars(obj)
    else:
        return _safe_str(obj)


def safe_json_dumps(payload: Any) -> str:
    """
    Serialize ``payload`` to a JSON string without ever raising.

    Falls back to ``repr()`` of the top-level values when the payload cannot
    be encoded (circular references, nesting too deep for the encoder,
    hooks that raise).
    """
    try:
        return json.dumps(payload, default=safe_json_serialize, ensure_ascii=False)
    except Exception:
        pass

    if isinstance(payload, dict):
        degraded = {}
        for key, value in payload.items():
            try:
                json.dumps(value, default=safe_json_serialize)
                degraded[_safe_str(key)] = value
            except Exception:
                degraded[_safe_str(key)] = _safe_str(value, repr)
        try:
            return json.dumps(degraded, default=safe_json_serialize, ensure_ascii=False)
        except Exception:
            pass
    return json.dumps(_safe_str(payload, repr), ensure_ascii=False)
