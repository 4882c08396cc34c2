# app/api/v1/router.py
from fastapi import APIRouter

from file_store.app.api.v1.files import router as files_router

api_router = APIRouter()
api_router.include_router(files_router.router)
