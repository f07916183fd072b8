from __future__ import annotations

from typing import Any, Optional

from ..core.enums import Role
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_role(value: Any) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        raise ValidationError(f"Invalid role: {value!r}")


def optional_id(value: Any, field_name: str) -> Optional[int]:
    """Falsy values (None, 0, "") mean no reference."""

    if not value:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
