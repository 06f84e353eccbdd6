from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def require_int_range(value, field_name: str, min_value: int, max_value: int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    if number < min_value or number > max_value:
        raise ValidationError(f"{field_name} deve estar entre {min_value} e {max_value}")
    return number


def require_hex_color(value, field_name: str) -> str:
    if not isinstance(value, str) or not _HEX_COLOR_RE.match(value.strip()):
        raise ValidationError(f"{field_name} deve ser uma cor no formato #rrggbb")
    return value.strip().lower()
