import uuid
import logging
from typing import Any, Iterable, List

from core.errors import InputError

logger = logging.getLogger(__name__)


def parse_id(value: Any, label: str = "id") -> uuid.UUID:
    """Coerce a talent/startup/founder id to a UUID.

    Raises:
        InputError: value is empty or not a UUID.
    """
    if isinstance(value, uuid.UUID):
        return value
    if value is None or not str(value).strip():
        raise InputError(f"Missing {label}")
    try:
        return uuid.UUID(str(value).strip())
    except ValueError:
        raise InputError(f"Malformed {label}: {value!r}")


def parse_ids(values: Iterable[Any], label: str = "id") -> List[uuid.UUID]:
    """Parse and de-duplicate ids, keeping first-seen order."""
    seen = {}
    for value in values or ():
        parsed = parse_id(value, label)
        seen.setdefault(parsed, None)
    return list(seen)
