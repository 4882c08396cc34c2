from file_store.app.core.config import settings

__all__ = ['settings']
