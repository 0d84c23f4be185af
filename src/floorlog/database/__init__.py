"""Database integration components."""
from __future__ import annotations

from .models import Base, FloorUpdateModel, ReportModel
from .storage import Storage, StorageError, create_storage

__all__ = [
    "Base",
    "FloorUpdateModel",
    "ReportModel",
    "Storage",
    "StorageError",
    "create_storage",
]
