import json
import re
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

_ISO8601_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:\d{2})$")


def to_iso8601(value: datetime) -> str:
    """Format a datetime as a UTC ISO-8601 string with millisecond precision, e.g. ``2024-01-31T08:15:00.250Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def parse_iso8601(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime, or return None."""
    if not _ISO8601_RE.match(value):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.astimezone(timezone.utc)


def json_copy(data: Any, default: Callable[[Any], Any] | None = None) -> Any:
    """Deep-copy a JSON-compatible tree by serializing it."""
    return json.loads(json.dumps(data, default=default))
