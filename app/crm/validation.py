from __future__ import annotations

import re
from typing import Any

from app.crm.errors import BadRequestError

CUSTOMER_FIELDS = ("name", "email")

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")
ID_RE = re.compile(r"^([+-]?\d+)(?:\.0*)?$")
MAX_CUSTOMER_ID = 2**63 - 1


def validate_dto_fields(dto: Any, allowed_fields: tuple[str, ...] | list[str]) -> None:
    """
    Reject anything that is not a JSON object, or that carries keys outside `allowed_fields`.
    The error lists the offending keys in input order.
    """
    if not isinstance(dto, dict):
        raise BadRequestError("Invalid DTO: Expected an object.")
    invalid = [str(k) for k in dto if k not in allowed_fields]
    if invalid:
        raise BadRequestError(f"Invalid fields: {', '.join(invalid)}")


def validate_customer_values(data: dict) -> None:
    """Check every name/email present in `data`. Absent keys are not checked."""
    errors: list[str] = []
    for field in CUSTOMER_FIELDS:
        if field not in data:
            continue
        value = data[field]
        if not isinstance(value, str):
            errors.append(f"{field} must be a string")
        elif not value.strip():
            errors.append(f"{field} should not be empty")
        elif field == "email" and not EMAIL_RE.match(value):
            errors.append("email must be an email")
    if errors:
        raise BadRequestError("; ".join(errors))


def require_customer_fields(data: dict) -> None:
    if not data.get("name") or not data.get("email"):
        raise BadRequestError("Invalid customer data.")


def coerce_customer_id(raw: Any) -> int | None:
    """
    Numeric coercion for ids taken from the URL. None when `raw` is not a whole number
    or falls outside the INTEGER primary key range, so lookups report not found.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        m = ID_RE.match(str(raw).strip())
        if not m:
            return None
        value = int(m.group(1))
    if not 1 <= value <= MAX_CUSTOMER_ID:
        return None
    return value
