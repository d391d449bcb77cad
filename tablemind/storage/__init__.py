from .base import StorageBackend
from .memory import InMemoryStorage
from .filesystem import FilesystemStorage

__all__ = ["StorageBackend", "InMemoryStorage", "FilesystemStorage"]
