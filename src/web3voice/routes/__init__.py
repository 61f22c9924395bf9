"""API route exports."""

from .ai import router as ai_router
from .health import router as health_router
from .ipfs import router as ipfs_router
from .near import router as near_router

__all__ = ["ai_router", "health_router", "ipfs_router", "near_router"]
