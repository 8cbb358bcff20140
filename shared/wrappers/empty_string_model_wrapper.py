from datetime import date, datetime
import re
from uuid import UUID
from pydantic import BaseModel, model_validator
from typing import Any, Union, get_args, get_origin

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively strip strings, drop invisible chars and turn blanks into None."""

    if isinstance(value, BaseModel):
        data = value.model_dump(exclude_unset=True)
        cleaned = deep_clean(data)
        return type(value)(**cleaned)

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    if isinstance(value, UUID):
        return value

    return value


def safe_parse_date(value: Any):
    """Convert date strings to date. Blank becomes None, anything unparseable is rejected."""
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    try:
        return datetime.fromisoformat(str(value).strip()).date()
    except ValueError:
        raise ValueError(f"Invalid date: {value}")


def _is_date_annotation(annotation) -> bool:
    origin = get_origin(annotation)
    args = get_args(annotation)
    return (
        annotation is date
        or (origin is Union and any(a is date for a in args))
    )


class EmptyStringModel(BaseModel):
    """
    Base for request payloads: blank strings arrive as None so "present and
    non-empty" checks only have to look for None.
    """
    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return deep_clean(values)
        return values

    @model_validator(mode="before")
    @classmethod
    def fix_dates(cls, values):
        if not isinstance(values, dict):
            return values

        for field_name, field in cls.model_fields.items():
            if field_name in values and _is_date_annotation(field.annotation):
                values[field_name] = safe_parse_date(values[field_name])

        return values
