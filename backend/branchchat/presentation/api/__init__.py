"""
API Routers - FastAPI endpoint definitions.
"""

from branchchat.presentation.api.auth import router as auth_router
from branchchat.presentation.api.conversations import router as conversations_router
from branchchat.presentation.api.messages import router as messages_router
from branchchat.presentation.api.videos import upload_router, videos_router

__all__ = [
    "auth_router",
    "conversations_router",
    "messages_router",
    "upload_router",
    "videos_router",
]
