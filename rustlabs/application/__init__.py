"""Application layer services."""

from .labs_service import LabsServiceError, RustLabsApplicationService

__all__ = [
    "LabsServiceError",
    "RustLabsApplicationService",
]
