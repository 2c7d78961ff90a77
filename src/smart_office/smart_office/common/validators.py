from __future__ import annotations

from ..core.exceptions import ValidationError

CHECK_IN_WORDS = frozenset({"in", "i", "1", "check-in", "checkin"})
CHECK_OUT_WORDS = frozenset({"out", "o", "0", "check-out", "checkout"})


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}") from None


def require_direction_flag(value: str) -> bool:
    """Map user input such as "in"/"out" to ``True`` for check-in."""
    text = require_non_empty(value or "", "direction").lower()
    if text in CHECK_IN_WORDS:
        return True
    if text in CHECK_OUT_WORDS:
        return False
    raise ValidationError(f"direction must be 'in' or 'out', got {value!r}")
