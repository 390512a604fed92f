from .labs import router as labs_router
from .system import router as system_router

__all__ = [
    "labs_router",
    "system_router",
]
