"""
Boundary decoders for loosely typed request input.
They return Ok/Err and never raise past the boundary.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import StrictBool, StrictStr, TypeAdapter, ValidationError

from file_store.app.domain.common.result import Err, Ok, Result
from file_store.app.domain.files.entities import UploadOptions

_options_adapter = TypeAdapter(dict[str, Any])
_names_adapter = TypeAdapter(list[StrictStr])
_flag_adapter = TypeAdapter(Optional[StrictBool])


def decode_upload_options(raw: Optional[str]) -> Result[UploadOptions]:
    if raw is None or not raw.strip():
        return Ok(UploadOptions())
    try:
        parsed = _options_adapter.validate_json(raw)
    except ValidationError:
        return Err("ops must be a JSON object")

    flag = parsed.get("isPrivate", parsed.get("is_private"))
    try:
        flag = _flag_adapter.validate_python(flag)
    except ValidationError:
        # anything but an explicit boolean keeps the default
        flag = None

    # files stay private unless the caller explicitly says otherwise
    return Ok(UploadOptions(is_private=flag is not False))


def decode_storage_names(body: Any) -> Result[list[str]]:
    try:
        names = _names_adapter.validate_python(body)
    except ValidationError:
        return Err("Invalid Input: expected a JSON array of file names")
    return Ok(names)
