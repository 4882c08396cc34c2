from __future__ import annotations

import mimetypes
from typing import Mapping, Sequence

from file_store.app.domain.files.entities import (
    DEFAULT_CONTENT_TYPE,
    DeleteOutcome,
    DeletionResult,
    NewFileRecord,
    UploadedPayload,
)
from file_store.app.domain.files.errors import DeletionFailure, ValidationFailure
from file_store.app.domain.files.value_objects import new_storage_name


def validate_payload(payload: UploadedPayload) -> None:
    if not payload.original_filename:
        raise ValidationFailure(f"Uploaded file {payload.staged_path.name} has no original filename")
    if payload.declared_size is None:
        raise ValidationFailure(f"Uploaded file {payload.original_filename} has no size")
    if payload.declared_size < 0:
        raise ValidationFailure(f"Uploaded file {payload.original_filename} has a negative size")


def resolve_content_type(payload: UploadedPayload) -> str:
    if payload.content_type:
        return payload.content_type
    guessed, _ = mimetypes.guess_type(payload.original_filename or "")
    return guessed or DEFAULT_CONTENT_TYPE


def payload_to_new_record(
    payload: UploadedPayload,
    *,
    owner_id: str,
    is_private: bool,
) -> NewFileRecord:
    return NewFileRecord(
        original_filename=payload.original_filename,
        storage_name=new_storage_name(),
        author_id=owner_id,
        size=payload.declared_size,
        is_private=is_private,
        content_type=resolve_content_type(payload),
    )


def merge_deletion_outcomes(
    names: Sequence[str],
    catalog_outcomes: Mapping[str, DeleteOutcome],
    blob_outcomes: Mapping[str, DeleteOutcome],
) -> list[DeletionResult]:
    results: list[DeletionResult] = []
    for name in names:
        catalog_outcome = catalog_outcomes.get(name)
        blob_outcome = blob_outcomes.get(name)
        if catalog_outcome is None:
            raise DeletionFailure(f"Invalid results from catalog operation for {name}")
        if blob_outcome is None:
            raise DeletionFailure(f"Invalid results from file system operation for {name}")

        result = DeletionResult(storage_name=name, file_details=catalog_outcome.record)
        if catalog_outcome.error:
            result.errors.append(catalog_outcome.error)
        if blob_outcome.error:
            result.errors.append(blob_outcome.error)
        results.append(result)
    return results
