"""Shared schema helpers: past-date parsing, error maps, table/view payloads."""

import datetime as dt

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from tracker.store import View


def past_date(value, message: str) -> dt.date:
    """Parse an ISO calendar date and require it to be strictly before today."""
    if isinstance(value, dt.datetime):
        value = value.date()
    if isinstance(value, str):
        try:
            value = dt.date.fromisoformat(value.strip())
        except ValueError:
            raise PydanticCustomError("past_date", message) from None
    if not isinstance(value, dt.date) or value >= dt.date.today():
        raise PydanticCustomError("past_date", message)
    return value


def min_length(value: str, length: int, message: str) -> str:
    if len(value) < length:
        raise PydanticCustomError("string_too_short", message)
    return value


def field_errors(exc: ValidationError) -> dict[str, str]:
    """
    Map a pydantic ValidationError to {field: message}.

    Keys are the external (camelCase) field names; only the first
    message for each field is kept.
    """
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__all__",)
        errors.setdefault(str(loc[0]), err["msg"])
    return errors


# ── Table / view payloads ───────────────────────────


class SortStateItem(BaseModel):
    """Current sort of a table; both fields null when unsorted."""
    column: str | None = None
    direction: str | None = None


class ViewState(BaseModel):
    active_view: View
