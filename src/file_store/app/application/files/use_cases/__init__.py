# file_store/app/application/files/use_cases/__init__.py
from .delete_files import DeleteFilesUseCase
from .list_files import ListFilesUseCase
from .retrieve_file import RetrieveFileUseCase
from .upload_files import UploadFilesUseCase

__all__ = [
    "DeleteFilesUseCase",
    "ListFilesUseCase",
    "RetrieveFileUseCase",
    "UploadFilesUseCase",
]
