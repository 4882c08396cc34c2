# file_store/app/domain/files/value_objects.py
from __future__ import annotations

import re
from enum import StrEnum
from uuid import uuid4

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
_REPEATED_UNDERSCORES = re.compile(r"_+")


class SortBy(StrEnum):
    ORIGINAL_NAME = "original_name"
    DATE_ADDED = "date_added"


def sanitize_filename(filename: str) -> str:
    """
    Make a user-controlled name safe to use as a single path segment.
    Everything outside [A-Za-z0-9._-] becomes "_", then runs of "_" collapse.
    """
    sanitized = _UNSAFE_CHARS.sub("_", filename)
    return _REPEATED_UNDERSCORES.sub("_", sanitized)


def new_storage_name() -> str:
    return str(uuid4())
