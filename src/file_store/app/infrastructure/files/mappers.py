from datetime import timezone

from file_store.app.domain.files.entities import FileRecord, NewFileRecord
from file_store.app.infrastructure.db.models.file_record import FileRecordModel


def file_record_model_to_domain(m: FileRecordModel) -> FileRecord:
    date_added = m.date_added
    if date_added.tzinfo is None:
        # sqlite drops the offset; everything is stored as UTC
        date_added = date_added.replace(tzinfo=timezone.utc)
    return FileRecord(
        id=m.id,
        original_filename=m.original_filename,
        storage_name=m.storage_name,
        author_id=m.author_id,
        size=m.size,
        is_private=m.is_private,
        content_type=m.content_type,
        date_added=date_added,
    )


def file_record_domain_to_model(r: FileRecord) -> FileRecordModel:
    return FileRecordModel(
        id=r.id,
        original_filename=r.original_filename,
        storage_name=r.storage_name,
        author_id=r.author_id,
        size=r.size,
        is_private=r.is_private,
        content_type=r.content_type,
        date_added=r.date_added,
    )


def new_file_record_to_model(r: NewFileRecord) -> FileRecordModel:
    return file_record_domain_to_model(r.to_record())
