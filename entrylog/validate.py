from __future__ import annotations

import re

from .entry import FLAG_FIELDS, Entry
from .errors import InvalidDateFormat, InvalidSlugFormat, MissingArgument

# Shape check only: 2025-13-40 passes. Sorting relies on plain string order.
DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def is_valid_date(value: str) -> bool:
    return DATE_RE.fullmatch(value) is not None


def is_valid_slug(value: str) -> bool:
    return SLUG_RE.fullmatch(value) is not None


def validate_flags(flags: dict[str, str]) -> Entry:
    for key in FLAG_FIELDS:
        if not flags.get(key):
            raise MissingArgument(key)
    if not is_valid_date(flags["date"]):
        raise InvalidDateFormat(flags["date"])
    if not is_valid_slug(flags["slug"]):
        raise InvalidSlugFormat(flags["slug"])
    return Entry.from_flags(flags)
